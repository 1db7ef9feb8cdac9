"""Command line interface for pdfdoc-password."""

from __future__ import annotations

import getpass
import logging
import unicodedata
from importlib.metadata import PackageNotFoundError, version

import click
from rich.console import Console
from rich.table import Table

from pdfdoc_password import __version__
from pdfdoc_password.codec import (
    COMMON_SPECIALS,
    DECRYPT_ONLY_SPECIALS,
    LEGACY_TABLE,
    FailureKind,
    Mode,
    convert_into,
    inspect_password,
    password_bytes,
    required_length,
)
from pdfdoc_password.codec.report import PasswordReport
from pdfdoc_password.codec.tables import FALLBACK_BYTE, LEGACY_TABLE_START
from pdfdoc_password.secure_memory import SecureBuffer

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_INVALID_ENCODING = 2
EXIT_UNMAPPABLE = 3

console = Console()

_MODE_CHOICE = click.Choice([mode.value for mode in Mode], case_sensitive=False)


def _package_version() -> str:
    try:
        return version("pdfdoc-password")
    except PackageNotFoundError:
        return __version__


def _prompt_password(password_opt: str | None) -> str:
    if password_opt is not None:
        return password_opt
    return getpass.getpass("Password: ")


def _char_name(code_point: int) -> str:
    return unicodedata.name(chr(code_point), f"U+{code_point:04X}")


def _byte_label(value: int | None) -> str:
    if value is None:
        return "[red]rejected[/red]"
    return f"0x{value:02X}"


def _failure_exit(kind: FailureKind) -> int:
    return EXIT_INVALID_ENCODING if kind is FailureKind.INVALID_ENCODING else EXIT_UNMAPPABLE


def _failure_message(kind: FailureKind, offset: int | None, code_point: int | None, mode: Mode) -> str:
    if kind is FailureKind.INVALID_ENCODING:
        return f"[red]Password is not valid UTF-8 (byte offset {offset}).[/red]"
    return (
        f"[red]Password contains U+{code_point or 0:04X} ({_char_name(code_point or 0)}), "
        f"which cannot be used to {mode.value} a legacy PDF.[/red]"
    )


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="pdfdoc-password")
@click.option("--verbose/--quiet", default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Convert passwords to PDFDocEncoding for legacy PDF security."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("pdfdoc_password").setLevel(logging.DEBUG)


@cli.command(
    help="Convert a password and print its PDFDocEncoding bytes.",
    epilog="Examples:\n  pdfpass convert --password 'café'\n  pdfpass convert --mode decrypt --format raw > pw.bin",
)
@click.option("--password", "password_opt", help="Password to convert (will prompt if omitted).")
@click.option(
    "--mode",
    type=_MODE_CHOICE,
    default=Mode.ENCRYPT.value,
    show_default=True,
    help="encrypt: portable characters only; decrypt: also legacy platform mappings.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["hex", "raw"], case_sensitive=False),
    default="hex",
    show_default=True,
    help="Print hex digits or write the raw bytes to stdout.",
)
@click.pass_context
def convert(ctx: click.Context, password_opt: str | None, mode: str, output_format: str) -> None:
    selected = Mode(mode.lower())
    data = password_bytes(_prompt_password(password_opt))

    query = required_length(data, selected)
    if not query.ok:
        assert query.failure is not None
        console.print(_failure_message(query.failure, query.offset, query.code_point, selected))
        ctx.exit(_failure_exit(query.failure))
        return

    with SecureBuffer(query.count or 0) as buf:
        convert_into(data, selected, buf).raise_for_failure()
        if output_format.lower() == "raw":
            stream = click.get_binary_stream("stdout")
            stream.write(bytes(buf))
            stream.flush()
        else:
            click.echo(buf.hex(" "))
    ctx.exit(EXIT_SUCCESS)


def _report_table(report: PasswordReport) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Offset", justify="right")
    table.add_column("Char")
    table.add_column("Code point", no_wrap=True)
    table.add_column("Encrypt")
    table.add_column("Decrypt")
    table.add_column("Rule")
    for char in report.characters:
        printable = char.character if char.character.isprintable() else "?"
        table.add_row(
            str(char.offset),
            printable,
            f"U+{char.code_point:04X}",
            _byte_label(char.encrypt_byte),
            _byte_label(char.decrypt_byte),
            char.category,
        )
    return table


@cli.command(
    help="Show how each character of a password maps in both modes.",
    epilog="Example:\n  pdfpass inspect --password 'Łódź™'",
)
@click.option("--password", "password_opt", help="Password to inspect (will prompt if omitted).")
@click.option(
    "--mode",
    type=_MODE_CHOICE,
    default=Mode.DECRYPT.value,
    show_default=True,
    help="Mode used for the overall verdict.",
)
@click.pass_context
def inspect(ctx: click.Context, password_opt: str | None, mode: str) -> None:
    selected = Mode(mode.lower())
    report = inspect_password(_prompt_password(password_opt), selected)

    console.print("[bold]Password characters[/bold]")
    console.print(_report_table(report))

    if report.result.ok:
        console.print(f"[green]Converts to {report.result.count} byte(s) for {selected.value}.[/green]")
    else:
        assert report.result.failure is not None
        console.print(
            _failure_message(report.result.failure, report.result.offset, report.result.code_point, selected)
        )
    if report.portable:
        console.print("[green]Portable: accepted when protecting a document.[/green]")
    else:
        console.print("[yellow]Not portable: contains characters refused when protecting a document.[/yellow]")

    if report.result.failure is not None:
        ctx.exit(_failure_exit(report.result.failure))
        return
    ctx.exit(EXIT_SUCCESS)


@cli.command(
    help="Print the legacy mapping tables.",
    epilog="Examples:\n  pdfpass table\n  pdfpass table --range specials",
)
@click.option(
    "--range",
    "table_range",
    type=click.Choice(["legacy", "specials"], case_sensitive=False),
    default="legacy",
    show_default=True,
    help="legacy: U+0100..U+01FF table; specials: dedicated punctuation slots.",
)
def table(table_range: str) -> None:
    out = Table(show_header=True, header_style="bold")
    out.add_column("Code point", no_wrap=True)
    out.add_column("Name")
    out.add_column("Byte", no_wrap=True)
    out.add_column("Modes", no_wrap=True)

    if table_range.lower() == "legacy":
        for index, value in enumerate(LEGACY_TABLE):
            code_point = LEGACY_TABLE_START + index
            if code_point in COMMON_SPECIALS:
                value, modes = COMMON_SPECIALS[code_point], "both"
            else:
                modes = "decrypt (fallback)" if value == FALLBACK_BYTE else "decrypt"
            out.add_row(f"U+{code_point:04X}", _char_name(code_point), f"0x{value:02X}", modes)
    else:
        for code_point, value in sorted(COMMON_SPECIALS.items()):
            out.add_row(f"U+{code_point:04X}", _char_name(code_point), f"0x{value:02X}", "both")
        for code_point, value in sorted(DECRYPT_ONLY_SPECIALS.items()):
            out.add_row(f"U+{code_point:04X}", _char_name(code_point), f"0x{value:02X}", "decrypt")

    console.print(out)


@cli.command("version", help="Show the installed version.")
def version_cmd() -> None:
    console.print(f"pdfdoc-password, version {_package_version()}")


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="pdfpass", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code
    except click.ClickException as exc:
        exc.show()
        return EXIT_USAGE
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_USAGE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
