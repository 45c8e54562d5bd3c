import logging
import os
import time
from typing import Optional

logger = logging.getLogger(__name__)


def get_history_file() -> Optional[str]:
    """Returns the history file of the user's shell, or None if it is unknown."""
    histfile = os.environ.get("HISTFILE")
    if histfile:
        return os.path.expanduser(histfile)

    shell = os.path.basename(os.environ.get("SHELL", ""))
    home = os.path.expanduser("~")
    if shell == "zsh":
        return os.path.join(home, ".zsh_history")
    if shell == "fish":
        return os.path.join(home, ".local", "share", "fish", "fish_history")
    if shell == "bash":
        return os.path.join(home, ".bash_history")
    return None


def format_history_entry(command: str, history_file: str) -> str:
    """Formats a command the way the owning shell writes its history."""
    name = os.path.basename(history_file)
    timestamp = int(time.time())
    if name == "fish_history":
        return f"- cmd: {command}\n  when: {timestamp}\n"
    if name == ".zsh_history":
        # zsh EXTENDED_HISTORY format
        return f": {timestamp}:0;{command}\n"
    return f"{command}\n"


def append_to_shell_history(command: str):
    """Appends a command to the user's shell history. Failures are ignored."""
    if not command.strip():
        return
    history_file = get_history_file()
    if not history_file:
        logger.debug("Unknown shell, not recording command in history")
        return
    try:
        with open(history_file, "a") as f:
            f.write(format_history_entry(command, history_file))
    except OSError as e:
        logger.debug(f"Failed to append to shell history {history_file}: {e}")
