import logging
import os
import subprocess
from typing import Optional

from .shell_history import append_to_shell_history

# Configure logging
logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs generated scripts in the user's shell."""

    def __init__(self, shell: Optional[str] = None):
        """
        Args:
            shell: Shell executable to use. Defaults to $SHELL, then the platform shell.
        """
        self.shell = shell or os.environ.get("SHELL") or None

    def run_script(self, script: str) -> bool:
        """
        Run a script in a subshell attached to the terminal.

        The subshell inherits stdin, stdout and stderr so interactive programs
        work, and it reports its own errors to the user. A nonzero exit status
        is therefore only logged.

        Args:
            script: The command line to run

        Returns:
            True if the script exited successfully

        Raises:
            OSError: If the shell itself could not be started
        """
        logger.info(f"Executing script: {script}")

        try:
            process = subprocess.run(script, shell=True, executable=self.shell)
        except OSError as e:
            logger.error(f"Could not start shell {self.shell or '(default)'}: {e}")
            raise

        if process.returncode != 0:
            logger.info(f"Script exited with return code {process.returncode}: {script}")
            return False

        logger.info(f"Script executed successfully: {script}")
        append_to_shell_history(script)
        return True


# Create a global executor instance
executor = CommandExecutor()
