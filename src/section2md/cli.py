"""Command-line interface for section2md.

Reads HTML files (or standard input), converts the marked section of each to
Markdown and prints the result or writes it to a file.

Examples
--------
Convert the task statement section of a saved page:
    $ section2md task.html

Convert the whole document:
    $ section2md page.html --full

Use other markers:
    $ section2md page.html --start-marker "Time Limit:" --end-marker "Constraints"

Write to a file:
    $ section2md task.html --out task.md

Preview in the terminal with rich formatting:
    $ section2md task.html --rich

Use environment variables for defaults:
    $ export SECTION2MD_START_MARKER="Time Limit:"
    $ section2md task.html
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from section2md._input_utils import is_html_filename
from section2md.constants import (
    DEFAULT_END_MARKERS,
    DEFAULT_HTML_PARSER,
    DEFAULT_START_MARKER,
    EXIT_DEPENDENCY_ERROR,
    EXIT_FILE_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RANGE_WARNING,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from section2md.converter import ConversionResult, HtmlSectionConverter
from section2md.exceptions import FileError, InputError, ParseFailure, Section2MdError
from section2md.logging_utils import configure_logging
from section2md.options import ConversionOptions, ExtractionOptions

logger = logging.getLogger(__name__)

ENV_PREFIX = "SECTION2MD_"


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with SECTION2MD_ prefix."""
    env_key = f"{ENV_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def get_env_list_value(key: str) -> list[str]:
    """Get a comma-separated SECTION2MD_ environment variable as a list."""
    env_value = get_env_var_value(key)
    if env_value is None:
        return []
    return [value for value in env_value.split(",") if value]


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Use environment variables as defaults for parser arguments.

    Command line arguments still take precedence over environment variables.
    Repeatable options keep a None default, since argparse appends to it;
    their environment values are read by :func:`build_options` instead.
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "inputs"):
            continue
        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            enabled = env_value.lower() in ("true", "1", "yes", "on")
            action.default = enabled if isinstance(action, argparse._StoreTrueAction) else not enabled
        elif isinstance(action, argparse._AppendAction):
            continue
        elif action.choices and env_value not in action.choices:
            logger.warning(
                "Invalid choice for %s%s: %s. Choices: %s",
                ENV_PREFIX,
                action.dest.upper(),
                env_value,
                list(action.choices),
            )
        else:
            action.default = env_value


def _get_version() -> str:
    try:
        from importlib.metadata import version

        return version("section2md")
    except Exception:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="section2md",
        description="Convert HTML documents, or a marked section of them, to Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help="HTML files to convert. Reads standard input when omitted or '-'.",
    )
    parser.add_argument("--version", action="version", version=f"section2md {_get_version()}")
    parser.add_argument("--out", "-o", metavar="PATH", help="Write Markdown to PATH instead of standard output")
    parser.add_argument(
        "--full",
        action="store_true",
        help="Convert the whole document instead of the section between the markers",
    )
    parser.add_argument(
        "--start-marker",
        default=DEFAULT_START_MARKER,
        metavar="TEXT",
        help=f"Text contained in the element opening the section (default: {DEFAULT_START_MARKER!r})",
    )
    parser.add_argument(
        "--end-marker",
        dest="end_markers",
        action="append",
        metavar="TEXT",
        help="Accepted text of the element closing the section; repeat for aliases "
        f"(default: {', '.join(repr(m) for m in DEFAULT_END_MARKERS)})",
    )
    parser.add_argument(
        "--innermost",
        action="store_true",
        help="Match the innermost element containing a marker rather than the first (outermost) one",
    )
    parser.add_argument(
        "--parser",
        choices=["html.parser", "html5lib", "lxml"],
        default=DEFAULT_HTML_PARSER,
        help=f"HTML parser backend (default: {DEFAULT_HTML_PARSER})",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Convert files even when they do not have an .html or .htm extension",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Render results and a summary with rich terminal formatting",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Include timestamps and logger names in log output",
    )
    apply_env_vars_to_parser(parser)
    return parser


def build_options(parsed_args: argparse.Namespace) -> ConversionOptions:
    """Map parsed arguments to conversion options.

    Raises
    ------
    ValueError
        If the marker options are unusable.

    """
    if parsed_args.full:
        extraction = ExtractionOptions.full_document()
    else:
        extraction = ExtractionOptions(
            start_marker=parsed_args.start_marker,
            end_markers=tuple(parsed_args.end_markers or get_env_list_value("end_markers") or DEFAULT_END_MARKERS),
            innermost=parsed_args.innermost,
        )
    return ConversionOptions(parser=parsed_args.parser, extraction=extraction)


def _exit_code_for_exception(exception: Section2MdError) -> int:
    if isinstance(exception, ParseFailure):
        return EXIT_PARSING_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, InputError):
        return EXIT_INPUT_ERROR
    return EXIT_VALIDATION_ERROR


def _convert_one(converter: HtmlSectionConverter, label: str, source: object) -> tuple[Optional[ConversionResult], int]:
    try:
        result = converter.convert_source(source)  # type: ignore[arg-type]
    except Section2MdError as e:
        logger.error("%s: %s", label, e.message)
        return None, _exit_code_for_exception(e)

    if not result.ok:
        logger.warning("%s: section not found", label)
        return result, EXIT_RANGE_WARNING
    logger.info("Converted %s", label)
    return result, EXIT_SUCCESS


def _print_rich(records: list[tuple[str, ConversionResult]], failed: int, show_documents: bool) -> int:
    """Render converted documents and a summary table with rich.

    Returns
    -------
    int
        EXIT_SUCCESS, or EXIT_DEPENDENCY_ERROR when rich is not installed.

    """
    try:
        from rich.console import Console
        from rich.markdown import Markdown
        from rich.panel import Panel
        from rich.table import Table
    except ImportError:
        logger.error("Rich library not installed. Install with: pip install section2md[rich]")
        return EXIT_DEPENDENCY_ERROR

    console = Console()
    if show_documents:
        for label, result in records:
            if result.ok:
                console.print(Panel(Markdown(result.markdown), title=label))
            else:
                console.print(Panel(result.text, title=label, border_style="yellow"))

    converted = sum(1 for _, result in records if result.ok)
    table = Table(title="Conversion Summary")
    table.add_column("Status", style="cyan", no_wrap=True)
    table.add_column("Count", style="magenta")
    table.add_row("✓ Converted", str(converted))
    table.add_row("⚠ Section not found", str(len(records) - converted))
    table.add_row("✗ Failed", str(failed))
    console.print(table)
    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = build_options(parsed_args)
    except ValueError as e:
        logger.error("Invalid options: %s", e)
        return EXIT_VALIDATION_ERROR

    converter = HtmlSectionConverter(options)
    inputs = parsed_args.inputs or ["-"]

    records: list[tuple[str, ConversionResult]] = []
    failed = 0
    exit_code = EXIT_SUCCESS
    for item in inputs:
        if item == "-":
            label, source = "<stdin>", sys.stdin.buffer.read()
        else:
            path = Path(item)
            if not parsed_args.force and not is_html_filename(path):
                logger.error("%s: not an HTML file (use --force to convert anyway)", item)
                exit_code = max(exit_code, EXIT_INPUT_ERROR)
                failed += 1
                continue
            label, source = item, path

        result, code = _convert_one(converter, label, source)
        exit_code = max(exit_code, code)
        if result is None:
            failed += 1
        else:
            records.append((label, result))

    if records and parsed_args.out:
        content = "\n\n".join(result.text for _, result in records) + "\n"
        output_path = Path(parsed_args.out)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", output_path, e)
            return EXIT_FILE_ERROR
        logger.info("Wrote %s", output_path)

    if parsed_args.rich:
        rich_code = _print_rich(records, failed, show_documents=not parsed_args.out)
        if rich_code != EXIT_SUCCESS:
            return rich_code
    elif records and not parsed_args.out:
        sys.stdout.write("\n\n".join(result.text for _, result in records) + "\n")

    return exit_code
