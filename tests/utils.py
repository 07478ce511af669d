"""Test utilities for the section2md test suite.

This module provides helpers for building document trees and sample HTML
documents shaped like the pages the converter is used on.
"""

from bs4 import BeautifulSoup

from section2md.emitter import MarkdownEmitter


def make_soup(html: str) -> BeautifulSoup:
    """Parse ``html`` with the default parser backend."""
    return BeautifulSoup(html, "html.parser")


def render_fragment(html: str) -> str:
    """Render every top-level node of ``html`` and concatenate the output, unstripped."""
    return MarkdownEmitter().render_children(make_soup(html))


class HtmlTestGenerator:
    """Generator for HTML test documents."""

    @staticmethod
    def create_task_fragment() -> str:
        """Create a flat task page fragment with boilerplate around the section."""
        return """
        <div id="header">Contest Home</div>
        <p>実行時間制限: 2 sec / メモリ制限: 1024 MB</p>
        <p>配点 : 100 点</p>
        <h3>問題文</h3>
        <p>Given <var>A</var> and <var>B</var>, print their sum.</p>
        """

    @staticmethod
    def create_full_task_page() -> str:
        """Create a complete task page with head, scripts and a wrapping body."""
        return """<!DOCTYPE html>
<html>
<head>
    <title>A - Sum</title>
    <meta charset="utf-8">
    <link rel="stylesheet" href="style.css">
    <script>var label = "Problem Statement";</script>
    <style>p { color: red; }</style>
</head>
<body>
<nav>Contest Home</nav>
<div id="task-statement">
    <p>実行時間制限: 2 sec / メモリ制限: 1024 MB</p>
    <p>配点 : 100 点</p>
    <h3>Problem Statement</h3>
    <p>Given <var>A</var> and <var>B</var>, print their sum.</p>
</div>
<noscript>Enable JavaScript</noscript>
</body>
</html>
"""

    @staticmethod
    def create_nested_section() -> str:
        """Create a fragment whose start marker sits two levels deep."""
        return (
            "<section><div><p>実行時間制限: 1 sec</p></div><span>score</span></section>"
            "<h2>Problem Statement</h2><p>tail</p>"
        )
