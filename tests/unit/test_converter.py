"""Unit tests for the conversion pipeline."""

from io import BytesIO

import pytest
from utils import make_soup

from section2md.converter import ConversionResult, HtmlSectionConverter, convert, convert_file, range_warning
from section2md.exceptions import FileError, ParseFailure
from section2md.options import ConversionOptions, ExtractionOptions


class RecordingParser:
    """Parser double that records its input."""

    def __init__(self):
        self.calls = []

    def parse(self, text):
        self.calls.append(text)
        return make_soup(text)


class FailingParser:
    """Parser double that always fails."""

    def parse(self, text):
        raise ParseFailure("cannot parse")


@pytest.mark.unit
class TestFullDocumentConversion:
    """Conversion with range extraction disabled."""

    def test_paragraph(self, full_document_options):
        result = convert("<p>Hello <b>world</b></p>", full_document_options)

        assert result.ok
        assert result.markdown == "Hello **world**"

    def test_unordered_list(self, full_document_options):
        assert convert("<ul><li>a</li><li>b</li></ul>", full_document_options).markdown == "- a\n- b"

    def test_table(self, full_document_options):
        html = "<table><tr><th>A</th><th>B</th></tr><tr><td>1</td><td>2</td></tr></table>"

        markdown = convert(html, full_document_options).markdown

        assert markdown.splitlines() == ["| A | B |", "| --- | --- |", "| 1 | 2 |"]

    def test_only_body_is_converted(self, full_document_options):
        html = "<html><head><title>Page title</title></head><body><h1>Heading</h1></body></html>"

        assert convert(html, full_document_options).markdown == "# Heading"

    def test_scripts_and_styles_are_dropped(self, full_document_options):
        html = "<div><style>p { color: red }</style><p>text</p><script>alert(1)</script></div>"

        assert convert(html, full_document_options).markdown == "text"

    def test_ruby_reading_only_paragraph(self, full_document_options):
        assert convert("<p><ruby><rt>かん</rt></ruby></p>", full_document_options).markdown == "かん"

    def test_empty_document(self, full_document_options):
        result = convert("", full_document_options)

        assert result.ok
        assert result.markdown == ""


@pytest.mark.unit
class TestScopedConversion:
    """Conversion with range extraction enabled."""

    def test_converts_marked_section(self, task_fragment):
        result = convert(task_fragment)

        assert result.ok
        assert result.markdown == "実行時間制限: 2 sec / メモリ制限: 1024 MB \n\n\n配点 : 100 点"

    def test_missing_start_is_a_warning(self):
        result = convert("<p>no markers</p>")

        assert not result.ok
        assert result.missing_boundary == "start"
        assert result.markdown == ""
        assert result.text == result.warning

    def test_missing_end_is_a_warning_not_partial_output(self):
        result = convert("<p>実行時間制限: 2 sec</p><p>配点 : 100 点</p>")

        assert not result.ok
        assert result.missing_boundary == "end"
        assert "配点" not in result.text

    def test_empty_range_is_a_warning(self, monkeypatch, task_fragment):
        monkeypatch.setattr("section2md.extractor.extract_range", lambda start, end: None)

        result = convert(task_fragment)

        assert not result.ok
        assert result.warning == range_warning(ExtractionOptions())

    def test_warning_names_markers(self):
        extraction = ExtractionOptions(start_marker="Time Limit:", end_markers=("Constraints", "Input"))

        result = convert("<p>nothing</p>", ConversionOptions(extraction=extraction))

        assert '"Time Limit:"' in result.warning
        assert '"Constraints / Input"' in result.warning


@pytest.mark.unit
class TestHtmlSectionConverter:
    """Collaborator wiring and input handling."""

    def test_injected_parser_is_used(self, full_document_options):
        parser = RecordingParser()
        converter = HtmlSectionConverter(full_document_options, parser=parser)

        converter.convert("<p>a</p>")
        converter.convert("<p>b</p>")

        assert parser.calls == ["<p>a</p>", "<p>b</p>"]

    def test_parse_failure_propagates(self):
        with pytest.raises(ParseFailure):
            HtmlSectionConverter(parser=FailingParser()).convert("<p>x</p>")

    def test_default_parser_follows_options(self):
        converter = HtmlSectionConverter(ConversionOptions(parser="html.parser"))

        assert converter.parser.features == "html.parser"

    def test_unavailable_backend_raises_parse_failure(self):
        options = ConversionOptions(parser="no-such-parser")  # type: ignore[arg-type]

        with pytest.raises(ParseFailure):
            convert("<p>x</p>", options)

    def test_convert_file_path(self, tmp_path, task_fragment):
        path = tmp_path / "task.html"
        path.write_text(task_fragment, encoding="utf-8")

        assert convert_file(path).markdown.startswith("実行時間制限:")

    def test_convert_file_binary_stream(self, full_document_options):
        result = convert_file(BytesIO("<h2>入力</h2>".encode("utf-8")), full_document_options)

        assert result.markdown == "## 入力"

    def test_convert_file_missing(self, tmp_path):
        with pytest.raises(FileError):
            convert_file(tmp_path / "missing.html")


@pytest.mark.unit
class TestConversionResult:
    """Result properties."""

    def test_success(self):
        result = ConversionResult(markdown="# Title")

        assert result.ok
        assert result.text == "# Title"

    def test_warning(self):
        result = ConversionResult(markdown="", warning="not found", missing_boundary="start")

        assert not result.ok
        assert result.text == "not found"
