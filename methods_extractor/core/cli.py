import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from methods_extractor.core import cli_help as ch
from methods_extractor.core import constants as cs
from methods_extractor.core import logs as ls
from methods_extractor.data_models.models import ExtractorOptions
from methods_extractor.data_models.types_defs import ExtractorOutputDict
from methods_extractor.extractor import Extractor
from methods_extractor.infrastructure import exceptions as ex

from .config import parse_script_target, settings

app = typer.Typer(
    name=cs.CLI_APP_NAME,
    help=ch.APP_DESCRIPTION,
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Replaces the default loguru sink with one on stderr.

    Args:
        verbose (bool): Log at DEBUG instead of the configured level.
    """
    logger.remove()
    level = cs.LOG_LEVEL_DEBUG if verbose else settings.LOG_LEVEL
    logger.add(sys.stderr, level=level)


@app.command()
def extract(
    paths: list[Path] = typer.Argument(..., help=ch.HELP_PATHS),
    filename: str | None = typer.Option(None, "--filename", help=ch.HELP_FILENAME),
    target: str = typer.Option(
        settings.DEFAULT_SCRIPT_TARGET.value, "--target", help=ch.HELP_TARGET
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=ch.HELP_VERBOSE),
) -> None:
    """
    Prints the exported methods of each file as JSON.

    A single file prints its result, or `null` when nothing is exported;
    several files print a mapping from path to result.

    Args:
        paths (list[Path]): The module files to inspect.
        filename (str | None): A name to parse every file under.
        target (str): The script target name.
        verbose (bool): Whether to log debug messages.
    """
    _configure_logging(verbose)

    try:
        script_target = parse_script_target(target)
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    extractor = Extractor()
    results: dict[str, ExtractorOutputDict | None] = {}
    for path in paths:
        if not path.is_file():
            message = ex.CLI_FILE_NOT_FOUND.format(path=path)
            err_console.print(f"[red]{message}[/red]")
            raise typer.Exit(1)

        logger.debug(ls.CLI_READING_FILE.format(path=path))
        options = ExtractorOptions(
            filename=filename or path.name, script_target=script_target
        )
        output = extractor.extract(path.read_text(encoding=cs.ENCODING_UTF8), options)
        results[str(path)] = output.to_dict() if output is not None else None

    if len(paths) == 1:
        console.print_json(data=results[str(paths[0])], indent=cs.JSON_INDENT)
    else:
        console.print_json(data=results, indent=cs.JSON_INDENT)


if __name__ == "__main__":
    app()
