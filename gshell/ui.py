import random
from typing import Optional, Sequence

from prompt_toolkit import prompt as toolkit_prompt
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from .errors import UserCancelled
from .i18n import i18n

FINISH_BANNER = "[dim]--------[/dim] 🏁 [dim]--------[/dim]"


class TerminalUI:
    """Terminal prompts, menus and streamed output."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def intro(self, project_name: str, prompt: Optional[str] = None):
        self.console.print(f"[dim]-----[/dim] [cyan]{project_name}[/cyan] [dim]-----[/dim]")
        if prompt:
            self.console.print(Text.assemble("<- ", (prompt, "dim")))

    def outro(self, message: str):
        self.console.print(message)

    def cancel(self, message: str):
        self.console.print(f"[red]■[/red] {message}")

    def error(self, message: str):
        self.console.print(Text(message, style="bold red"))

    def status(self, message: str):
        """Returns a spinner context manager shown while waiting on the backend."""
        return self.console.status(f"[yellow]{message}[/yellow]")

    def write(self, chunk: str):
        """Echoes a streamed chunk without interpreting markup."""
        self.console.print(chunk, end="", markup=False, highlight=False, soft_wrap=True)

    def heading(self, title: str):
        self.console.print(f"[bold]{title}:[/bold]")
        self.console.print()

    def end_block(self):
        self.console.print()
        self.console.print()
        self.console.print("[dim]•[/dim]")

    def show_running(self, label: str, script: str):
        """Announces the script about to run, printed verbatim."""
        self.console.print(Text.assemble(f"{label}: ", script))
        self.console.print()

    def show_script(self, script: str):
        self.console.print()
        self.console.print(Text.assemble("-> ", (script, "bold green")))

    def _ask_text(self, message: str, placeholder: str) -> str:
        """Asks for text until a non-empty value is entered."""
        if placeholder:
            self.console.print(f"[dim]{placeholder}[/dim]")
        while True:
            try:
                value = Prompt.ask(f"[bold cyan]{message}[/bold cyan]", console=self.console)
            except (KeyboardInterrupt, EOFError):
                raise UserCancelled(i18n.t("Goodbye!"))
            value = (value or "").strip()
            if value:
                return value
            self.console.print(f"[yellow]{i18n.t('Please enter a prompt.')}[/yellow]")

    def ask_prompt(self, examples: Sequence[str]) -> str:
        """Asks what the user would like to do, hinting with a random example."""
        placeholder = f"{i18n.t('e.g.')} {random.choice(examples)}" if examples else ""
        return self._ask_text(i18n.t("What would you like me to do?"), placeholder)

    def ask_revision(self) -> str:
        return self._ask_text(
            i18n.t("What would you like me to change in this script?"),
            i18n.t("e.g. change the folder name"),
        )

    def choose(self, message: str, options: Sequence):
        """
        Shows the numbered decision menu and returns the chosen option's action.

        Raises:
            UserCancelled: If the user interrupts the menu.
        """
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="right")
        table.add_column(style="bold")
        table.add_column(style="dim")
        for index, option in enumerate(options, 1):
            table.add_row(str(index), option.label, option.hint)

        self.console.print()
        self.console.print(table)
        choices = [str(index) for index in range(1, len(options) + 1)]
        try:
            answer = Prompt.ask(
                f"[bold yellow]{message}[/bold yellow]",
                console=self.console,
                choices=choices,
                default="1",
            )
        except (KeyboardInterrupt, EOFError):
            raise UserCancelled(i18n.t("Goodbye!"))
        return options[int(answer) - 1].kind

    def edit(self, script: str) -> Optional[str]:
        """Opens an input pre-filled with the script. Returns None if the edit is cancelled."""
        try:
            return toolkit_prompt(f"{i18n.t('you can edit script here:')} ", default=script)
        except (KeyboardInterrupt, EOFError):
            return None
