"""
The interactive command-resolution flow.

One user request goes through a generation round, is streamed to the terminal,
and then loops over a decision menu (run, edit, explain, revise, copy, cancel)
until the user picks a terminal action.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

import pyperclip

from .executor import CommandExecutor
from .extractor import extract_script_and_info
from .i18n import i18n
from .ui import FINISH_BANNER, TerminalUI

logger = logging.getLogger(__name__)

PROJECT_NAME = "gshell"


class State(Enum):
    AWAITING_PROMPT = "awaiting_prompt"
    GENERATING = "generating"
    PRESENTING = "presenting"
    AWAITING_DECISION = "awaiting_decision"
    RUNNING = "running"
    EDITING = "editing"
    EXPLAINING = "explaining"
    REVISING = "revising"
    COPYING = "copying"
    CANCELLED = "cancelled"


class Action(Enum):
    RUN = "run"
    EDIT = "edit"
    EXPLAIN = "explain"
    REVISE = "revise"
    COPY = "copy"
    CANCEL = "cancel"


@dataclass(frozen=True)
class MenuOption:
    kind: Action
    label: str
    hint: str


@dataclass
class Session:
    """State of one invocation, from the initial prompt to a terminal action."""

    prompt: str = ""
    script: str = ""
    # Cached explanation. Empty means not yet known.
    info: Optional[str] = None
    silent_mode: bool = False


def build_menu(script: str) -> Tuple[str, List[MenuOption]]:
    """
    Builds the decision menu for the current script.

    Running and editing are only offered when there is something to run.

    Returns:
        A tuple of (question, options).
    """
    empty_script = script.strip() == ""
    options = []
    if not empty_script:
        options.append(MenuOption(Action.RUN, "✅ " + i18n.t("Yes"), i18n.t("Lets go!")))
        options.append(MenuOption(Action.EDIT, "📝 " + i18n.t("Edit"), i18n.t("Make some adjustments before running")))
    options.extend([
        MenuOption(Action.EXPLAIN, "🤔 " + i18n.t("Explain"), i18n.t("Explain the script")),
        MenuOption(Action.REVISE, "🔁 " + i18n.t("Revise"), i18n.t("Give feedback via prompt and get a new result")),
        MenuOption(Action.COPY, "📋 " + i18n.t("Copy"), i18n.t("Copy the generated script to your clipboard")),
        MenuOption(Action.CANCEL, "❌ " + i18n.t("Cancel"), i18n.t("Exit the program")),
    ])
    message = i18n.t("Revise this script?") if empty_script else i18n.t("Run this script?")
    return message, options


class InteractionFlow:
    """Drives a session through generation and the decision loop."""

    def __init__(
        self,
        client,
        ui: TerminalUI,
        executor: CommandExecutor,
        examples: Sequence[str] = (),
        silent_mode: bool = False,
        copy_to_clipboard: Callable[[str], None] = pyperclip.copy,
    ):
        """
        Args:
            client: Completion backend exposing generate_script_and_info,
                generate_explanation and generate_revision.
            ui: Terminal front end.
            executor: Runs the final script.
            examples: Example prompts shown as a hint when asking for a prompt.
            silent_mode: Print the first script and stop without a menu.
            copy_to_clipboard: Clipboard writer.
        """
        self.client = client
        self.ui = ui
        self.executor = executor
        self.examples = list(examples)
        self.copy_to_clipboard = copy_to_clipboard
        self.session = Session(silent_mode=silent_mode)
        self.state = State.AWAITING_PROMPT

    def run(self, initial_prompt: Optional[str] = None) -> State:
        """
        Runs the whole session.

        Returns:
            The terminal state the session ended in. PRESENTING means the
            script was printed in silent mode.

        Raises:
            UserCancelled: If the user interrupts a text prompt.
            StreamError: If a backend stream fails.
        """
        self.ui.intro(PROJECT_NAME, initial_prompt)
        self.session.prompt = initial_prompt or self.ui.ask_prompt(self.examples)

        self.state = State.GENERATING
        self._generate()

        self.state = State.PRESENTING
        self.ui.show_script(self.session.script)
        if self.session.silent_mode:
            self.ui.outro(FINISH_BANNER)
            return self.state

        while True:
            self.state = State.AWAITING_DECISION
            message, options = build_menu(self.session.script)
            action = self.ui.choose(message, options)
            logger.info(f"User chose {action.value}")

            if action is Action.RUN:
                self.state = State.RUNNING
                self._run_script(self.session.script)
                return self.state

            if action is Action.EDIT:
                self.state = State.EDITING
                edited = self.ui.edit(self.session.script)
                if edited is None:
                    continue
                self.session.script = edited
                self.state = State.RUNNING
                self._run_script(edited)
                return self.state

            if action is Action.EXPLAIN:
                self.state = State.EXPLAINING
                self._explain()
                continue

            if action is Action.REVISE:
                self.state = State.REVISING
                self._revise()
                continue

            if action is Action.COPY:
                self.state = State.COPYING
                self._copy()
                return self.state

            self.state = State.CANCELLED
            self.ui.cancel(FINISH_BANNER)
            return self.state

    def _generate(self):
        with self.ui.status(i18n.t("Loading...")):
            stream = self.client.generate_script_and_info(self.session.prompt)
        raw = stream.drain(self.ui.write)
        self.session.script, info = extract_script_and_info(raw)
        self.session.info = info or None

    def _run_script(self, script: str):
        self.ui.show_running(i18n.t("Running"), script)
        try:
            self.executor.run_script(script)
        except OSError as e:
            self.ui.error(f"{i18n.t('Could not start the shell')}: {e}")

    def _explain(self):
        # The explanation streamed with the script has already been shown.
        if self.session.info:
            return
        with self.ui.status(i18n.t("Getting explanation...")):
            stream = self.client.generate_explanation(self.session.script)
        self.ui.heading(i18n.t("Explanation"))
        self.session.info = stream.drain(self.ui.write).strip() or None
        self.ui.end_block()

    def _revise(self):
        feedback = self.ui.ask_revision()
        with self.ui.status(i18n.t("Loading...")):
            stream = self.client.generate_revision(feedback, self.session.script)
        self.ui.heading(i18n.t("Your new script"))
        raw = stream.drain(self.ui.write)
        self.ui.end_block()
        self.session.script, _ = extract_script_and_info(raw)
        self.session.info = None

    def _copy(self):
        try:
            self.copy_to_clipboard(self.session.script)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Clipboard unavailable: {e}")
            self.ui.error(i18n.t("Could not copy to clipboard"))
            return
        self.ui.outro(i18n.t("Copied to clipboard!"))
