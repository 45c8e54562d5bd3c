import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from . import __version__
from .api import GeminiClient
from .config import get_config, get_config_values, parse_assert, set_config_values
from .errors import UserCancelled
from .executor import executor
from .flow import InteractionFlow
from .i18n import get_examples, i18n
from .logger import setup_logging
from .ui import TerminalUI

logger = logging.getLogger(__name__)

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gshell",
        description="""
        Turn a natural language request into a shell command with Gemini,
        then run, edit, explain, revise or copy it.

        Use `gshell config get|set` to manage settings.
        """
    )
    parser.add_argument("prompt", nargs="*", help="What you would like the command to do.")
    parser.add_argument("-s", "--silent", action="store_true", help="Only print the generated script, without the menu.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gshell config", description="Read or update gshell settings.")
    subparsers = parser.add_subparsers(dest="mode", required=True)

    get_parser = subparsers.add_parser("get", help="Print stored configuration values.")
    get_parser.add_argument("keys", nargs="+", help="Property names, e.g. GEMINI_MODEL.")

    set_parser = subparsers.add_parser("set", help="Store configuration values.")
    set_parser.add_argument("pairs", nargs="+", help="KEY=VALUE pairs, e.g. SILENT_MODE=true.")
    return parser


def handle_config(argv: List[str]) -> int:
    """Handler for the 'config' command."""
    args = build_config_parser().parse_args(argv)

    if args.mode == "get":
        for key, value in get_config_values(args.keys).items():
            console.print(f"{key}={'' if value is None else value}", markup=False, highlight=False)
        return 0

    pairs = {}
    for pair in args.pairs:
        key, sep, value = pair.partition("=")
        parse_assert(pair, sep and key, "Expected KEY=VALUE")
        pairs[key.strip()] = value
    set_config_values(pairs)
    return 0


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Parses the command line and runs the requested command."""
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "config":
        return handle_config(argv[1:])

    args = build_parser().parse_args(argv)

    config = get_config()
    setup_logging(config)
    logger.info(f"Loaded configuration: {config}")
    i18n.set_language(config.language)
    config.validate()

    client = GeminiClient(
        api_key=config.api_key,
        model=config.model,
        api_endpoint=config.api_endpoint,
        language=config.language,
    )
    ui = TerminalUI(console)
    flow = InteractionFlow(
        client=client,
        ui=ui,
        executor=executor,
        examples=get_examples(),
        silent_mode=args.silent or config.silent_mode,
    )

    try:
        final_state = flow.run(" ".join(args.prompt).strip() or None)
    except UserCancelled:
        ui.cancel(i18n.t("Goodbye!"))
        return 0

    logger.info(f"Session ended in state {final_state.value}")
    return 0
