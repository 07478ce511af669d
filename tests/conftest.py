"""Pytest configuration and shared fixtures for the section2md test suite."""

import logging
from typing import Generator

import pytest
from utils import HtmlTestGenerator

from section2md.options import ConversionOptions, ExtractionOptions


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def full_document_options() -> ConversionOptions:
    """Options converting the whole document without range extraction."""
    return ConversionOptions(extraction=ExtractionOptions.full_document())


@pytest.fixture
def task_fragment() -> str:
    """A task page fragment with the default markers."""
    return HtmlTestGenerator.create_task_fragment()


@pytest.fixture
def full_task_page() -> str:
    """A complete task page document."""
    return HtmlTestGenerator.create_full_task_page()


@pytest.fixture
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the section2md logger after tests that reconfigure logging."""
    package_logger = logging.getLogger("section2md")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    try:
        yield package_logger
    finally:
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)
        package_logger.propagate = propagate
