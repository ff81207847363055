"""Command line interface for ``ledgerconv``.

Two commands mirror the two stages of the workflow:

- ``convert``: bank CSV exports (one directory per account) to a single
  converted statement.
- ``enhance``: converted statement to enhanced statement, applying the
  auto-enhance rules and prompting for everything else.

The root callback loads ``.env`` from the working directory (existing
environment variables win) and configures package logging. Business logic
lives in :mod:`ledgerconv.convert` and :mod:`ledgerconv.enhance`; this module
only maps their exceptions to messages and exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_CONVERTED_FILE, DEFAULT_ENHANCED_FILE
from .convert import convert_statements, default_config
from .enhance import enhance_statement
from .errors import LedgerconvError
from .logging_setup import configure_logging

app = typer.Typer(
    name="ledgerconv",
    no_args_is_help=True,
    add_completion=False,
    help="Convert bank statement CSV exports and enhance them with budget categories.",
)
console = Console()
err_console = Console(stderr=True)

EXIT_INTERRUPTED = 130


def _fail(err: Exception) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(err))}", highlight=False)
    return typer.Exit(1)


@app.callback()
def _root(
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level (DEBUG, INFO, WARNING...). Falls back to LEDGERCONV_LOG_LEVEL.",
        ),
    ] = None,
) -> None:
    """Load ``.env`` and set up logging before any command runs."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


@app.command("convert")
def convert_cmd(
    input_dir: Annotated[
        Path,
        typer.Argument(help="Directory holding one subdirectory of CSV statements per account."),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Path of the converted statement file."),
    ] = Path(".") / DEFAULT_CONVERTED_FILE,
) -> None:
    """Convert bank statements into a single bank-agnostic JSON statement."""

    try:
        statement = convert_statements(input_dir, output, default_config())
    except LedgerconvError as e:
        raise _fail(e) from e
    console.print(
        f"[green]Converted {len(statement)} transactions into[/green] {escape(str(output))}"
    )


@app.command("enhance")
def enhance_cmd(
    input_file: Annotated[Path, typer.Argument(help="Converted statement file.")],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Enhanced statement file to create or update.",
        ),
    ] = Path(".") / DEFAULT_ENHANCED_FILE,
    auto_enhance_spec: Annotated[
        Path | None,
        typer.Option(
            "--auto-enhance-spec",
            "-s",
            envvar="LEDGERCONV_AUTO_ENHANCE_SPEC",
            help="Auto-enhance rules. Defaults to ./auto-enhance-spec.json when it exists.",
        ),
    ] = None,
    only_auto: Annotated[
        bool,
        typer.Option(
            "--only-auto",
            help="Skip transactions no rule matches instead of prompting for them.",
        ),
    ] = False,
) -> None:
    """Enhance new transactions with categories, labels and a summary."""

    def on_progress(msg: str) -> None:
        console.print(f"[cyan]{msg}[/cyan]")

    try:
        summary = enhance_statement(
            input_file,
            output,
            auto_enhance_spec,
            only_auto,
            on_progress=on_progress,
        )
    except LedgerconvError as e:
        raise _fail(e) from e
    except (KeyboardInterrupt, EOFError):
        err_console.print("\nInterrupted. Transactions saved so far are kept in the output file.")
        raise typer.Exit(EXIT_INTERRUPTED) from None

    console.print(
        f"[green]Enhanced {summary.appended} of {summary.candidates} new transactions[/green] "
        f"(auto: {summary.auto}, manual: {summary.manual}, skipped: {summary.skipped})"
    )


def main() -> None:  # pragma: no cover - console script shim
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
