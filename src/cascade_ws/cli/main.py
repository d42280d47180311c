"""Main CLI entry point for the cascade-ws command.

This module provides the Typer application for inspecting Cascade assets from
a terminal. Credentials come from the environment (or a .env file), see
``cascade_ws.client.auth``.
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer

from ..assets.types import AssetType, Category
from ..client.errors import (
    CascadeError,
    InvalidCredentialsError,
    NoSuchTypeError,
    OperationFailedError,
    TransportError,
)
from ..client.service import AssetOperationService
from .models import ExitCode
from .output import OutputHandler

app = typer.Typer(
    name="cascade-ws",
    help="""Inspect assets on a Cascade Server through its web services.

QUICK START:
  cascade-ws type 0bc94b1f8b7ffe83006a5cefe3ab1dac        # Find the type of an ID
  cascade-ws read folder / --site cascade-admin          # Read an asset
  cascade-ws regions _cascade/templates/main --site www  # Template page regions
  cascade-ws children folder / --site www                # Container children

Credentials are read from CASCADE_WSDL_URL, CASCADE_USERNAME and
CASCADE_PASSWORD (a .env file is honoured).""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class CliState:
    """Options shared by all commands."""
    verbosity: int
    output: OutputHandler


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'cascade_ws' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("cascade_ws")
    app_logger.setLevel(level)
    for handler in list(app_logger.handlers):
        handler.close()
    app_logger.handlers.clear()

    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(message)s", datefmt=date_format
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"cascade-ws_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt=date_format,
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _build_service() -> AssetOperationService:
    """Create the operation service from environment credentials."""
    return AssetOperationService.from_environment()


def _run(output: OutputHandler, action: Callable[[AssetOperationService], T]) -> T:
    """Run action against a fresh service, mapping errors to exit codes."""
    try:
        return action(_build_service())

    except InvalidCredentialsError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.AUTH_ERROR)

    except TransportError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.NETWORK_ERROR)

    except (NoSuchTypeError, OperationFailedError) as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.NOT_FOUND)

    except CascadeError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception("Unexpected error")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v info, -vv debug)",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
) -> None:
    """Inspect assets on a Cascade Server through its web services."""
    _configure_logging(verbose, logdir)
    ctx.obj = CliState(
        verbosity=verbose,
        output=OutputHandler(verbosity=verbose, no_color=no_color),
    )


@app.command("type")
def type_command(
    ctx: typer.Context,
    asset_id: str = typer.Argument(..., metavar="ID", help="32-digit hex asset ID"),
) -> None:
    """Discover the asset type of an ID."""
    output = ctx.obj.output
    found = _run(output, lambda service: service.discover_type(asset_id.strip()))
    if found is None:
        output.error(f"No asset type matches {asset_id}")
        raise typer.Exit(ExitCode.NOT_FOUND)
    output.print(found.value)


@app.command("read")
def read_command(
    ctx: typer.Context,
    asset_type: str = typer.Argument(..., metavar="TYPE", help="Wire type tag, e.g. folder or block_TEXT"),
    path_or_id: str = typer.Argument(..., metavar="PATH_OR_ID"),
    site: Optional[str] = typer.Option(None, "--site", "-s", help="Site name for path lookups"),
) -> None:
    """Read an asset and summarise it."""
    output = ctx.obj.output
    asset = _run(output, lambda service: service.get_asset(asset_type, path_or_id, site))
    output.print_asset(asset)


@app.command("regions")
def regions_command(
    ctx: typer.Context,
    path_or_id: str = typer.Argument(..., metavar="PATH_OR_ID"),
    site: Optional[str] = typer.Option(None, "--site", "-s", help="Site name for path lookups"),
) -> None:
    """List the page regions of a template."""
    output = ctx.obj.output
    template = _run(
        output, lambda service: service.get_asset(AssetType.TEMPLATE, path_or_id, site)
    )
    output.print_table(
        f"Page regions of {template.path or template.id}",
        ["Region", "Block", "Format", "No block", "No format"],
        [
            (
                region.name,
                region.block_path or region.block_id,
                region.format_path or region.format_id,
                region.no_block,
                region.no_format,
            )
            for region in template.page_regions
        ],
    )


@app.command("children")
def children_command(
    ctx: typer.Context,
    asset_type: str = typer.Argument(..., metavar="TYPE", help="Container type tag, e.g. folder"),
    path_or_id: str = typer.Argument(..., metavar="PATH_OR_ID"),
    site: Optional[str] = typer.Option(None, "--site", "-s", help="Site name for path lookups"),
) -> None:
    """List the children of a folder or container."""
    output = ctx.obj.output
    container = _run(output, lambda service: service.get_asset(asset_type, path_or_id, site))
    if container.CATEGORY is not Category.CONTAINER:
        output.error(f"{asset_type} is not a container type")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.print_table(
        f"Children of {container.path or container.id}",
        ["Type", "Path", "ID"],
        [(child.type, child.path_path, child.id) for child in container.children],
    )
    output.info(f"{container.child_count()} child(ren)")


def main() -> None:
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
