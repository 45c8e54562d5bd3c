import logging
import sys

from rich.console import Console

from .cli import run_cli
from .errors import GshellError

# Configure logging
logger = logging.getLogger(__name__)

console = Console(stderr=True)


def main():
    """Main entry point for the application."""
    try:
        exit_code = run_cli()
        sys.exit(exit_code)
    except GshellError as e:
        logger.info(f"Session aborted: {e}")
        console.print(f"[bold red]Error:[/bold red] {e}", highlight=False)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        console.print("\nOperation cancelled by user")
        sys.exit(130)  # 128 + SIGINT
    except Exception as e:
        logger.exception(f"Unhandled exception: {str(e)}")
        console.print(f"[bold red]Error:[/bold red] {e}", highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
