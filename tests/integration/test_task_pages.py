"""Integration tests converting complete task pages."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import pytest
from utils import HtmlTestGenerator

from section2md import ConversionOptions, ExtractionOptions, convert, convert_file


@pytest.mark.integration
class TestTaskPageConversion:
    """Full pipeline on realistic documents."""

    def test_outermost_match_covers_whole_document(self, full_task_page):
        # The html element is the first element containing the start marker and
        # nothing follows it, so the whole document is converted.
        result = convert(full_task_page)

        assert result.ok
        assert "Contest Home" in result.markdown
        assert "### Problem Statement" in result.markdown
        assert "A - Sum" in result.markdown
        assert "Enable JavaScript" not in result.markdown
        assert "color: red" not in result.markdown

    def test_innermost_match_isolates_section(self, full_task_page):
        options = ConversionOptions(extraction=ExtractionOptions(innermost=True))

        result = convert(full_task_page, options)

        assert result.markdown == "実行時間制限: 2 sec / メモリ制限: 1024 MB \n\n\n配点 : 100 点"

    def test_script_text_does_not_satisfy_end_marker(self):
        html = (
            '<div><p>実行時間制限: 2 sec</p><script>var s = "問題文";</script></div>'
        )

        result = convert(html)

        assert result.missing_boundary == "end"

    def test_full_document_mode(self, full_task_page, full_document_options):
        markdown = convert(full_task_page, full_document_options).markdown

        assert markdown.startswith("Contest Home")
        assert "Given $A$and $B$, print their sum." in markdown
        assert "A - Sum" not in markdown

    def test_nested_section_with_innermost_match(self):
        options = ConversionOptions(extraction=ExtractionOptions(innermost=True))

        result = convert(HtmlTestGenerator.create_nested_section(), options)

        assert result.markdown == "実行時間制限: 1 sec \n\nscore"

    def test_file_round_trip(self, tmp_path, task_fragment):
        path = tmp_path / "task.html"
        path.write_bytes(task_fragment.encode("utf-8"))

        result = convert_file(str(path))

        assert result.markdown.endswith("配点 : 100 点")

    def test_rich_section(self):
        html = """
        <div class="part">
            <p>実行時間制限: 2 sec</p>
            <h3>制約</h3>
            <ul>
                <li><var>1 \\leq N \\leq 100</var></li>
                <li>入力はすべて整数</li>
            </ul>
            <h3>入力例 1</h3>
            <pre>3
1 2 3</pre>
            <table>
                <thead><tr><th>i</th><th>A_i</th></tr></thead>
                <tbody><tr><td>1</td><td>5</td></tr></tbody>
            </table>
            <p>See <a href="https://example.com/editorial">editorial</a>.</p>
        </div>
        <h3>問題文</h3>
        """
        options = ConversionOptions(extraction=ExtractionOptions(innermost=True))

        markdown = convert(html, options).markdown

        assert markdown.splitlines() == [
            "実行時間制限: 2 sec ",
            "",
            "",
            "### 制約",
            "",
            "",
            "- $1 \\leq N \\leq 100$",
            "- 入力はすべて整数",
            "",
            "### 入力例 1",
            "",
            "",
            "```",
            "3",
            "1 2 3",
            "```",
            "",
            "",
            "| i | A_i |",
            "| --- | --- |",
            "| 1 | 5 |",
            "",
            "",
            "See [editorial](https://example.com/editorial).",
        ]
