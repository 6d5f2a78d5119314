"""
sway-workspace-nav CLI

Switch workspaces with optional output awareness for Sway/i3.

Usage:
    sway-workspace-nav [next|prev|next-output|prev-output|next-on-output|
                        prev-on-output|next-layout-aware|prev-layout-aware]
                       [-s SOCK] [-m] [-n] [-o] [-v]
"""

import logging
import sys

import click
from rich.console import Console

from . import __version__
from .config import NavigatorConfig, socket_from_env
from .errors import EXIT_IPC, EXIT_OK, NavigationError
from .ipc_client import SwayClient
from .models import NavigationMode
from .navigator import WorkspaceNavigator

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(verbosity: int) -> None:
    """Configure stderr logging; stdout is reserved for the workspace number."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def report_error(console: Console, error: NavigationError) -> None:
    console.print(f"Error [{error.code.name}]: {error.message}", style="red", markup=False)
    if error.suggestion:
        console.print(f"  → {error.suggestion}", markup=False)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "action",
    type=click.Choice([m.value for m in NavigationMode]),
    default=NavigationMode.NEXT.value,
)
@click.option(
    "-s", "--sock",
    "socket_path",
    default=socket_from_env,
    show_default="$SWAYSOCK or $I3SOCK",
    help="Sway/i3 IPC socket path",
)
@click.option("-m", "--move", "move", is_flag=True, help="Move the focused container to the new workspace")
@click.option("-n", "--no-focus", "no_focus", is_flag=True, help="Do not focus the new workspace")
@click.option("-o", "--stdout", "print_number", is_flag=True, help="Print workspace number to stdout")
@click.option("-v", "--verbose", count=True, help="Log to stderr (-v info, -vv debug)")
@click.version_option(__version__, "-V", "--version")
def cli(action: str, socket_path, move: bool, no_focus: bool, print_number: bool, verbose: int):
    """
    Switch workspaces with optional output awareness for Sway/i3.

    ACTION selects how the target workspace is computed (default: next).

    Exit codes:
      0 - Success
      1 - Window manager state broke a precondition (e.g., no focused workspace)
      2 - IPC failure (socket unreachable, query failed, command rejected)
    """
    configure_logging(verbose)
    console = Console(stderr=True)

    config = NavigatorConfig(
        mode=NavigationMode(action),
        socket_path=socket_path,
        move=move,
        focus=not no_focus,
        print_number=print_number,
    )

    try:
        with SwayClient(config.socket_path) as client:
            result = WorkspaceNavigator(client, config).navigate()
    except NavigationError as e:
        logger.debug(f"Navigation failed: {e.to_dict()}", exc_info=True)
        report_error(console, e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        console.print(f"Unexpected error: {e}", style="red", markup=False)
        sys.exit(EXIT_IPC)

    if config.print_number:
        click.echo(str(result.target), nl=False)

    sys.exit(EXIT_OK)


def main() -> None:
    cli()


if __name__ == '__main__':
    main()
