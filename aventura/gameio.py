from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.theme import Theme

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})


class GameIO:
    """
    Line in, lines out. Everything the game says goes through write(),
    which also keeps a transcript so tests can inspect the output.

    Pass `lines` to play from a script instead of the keyboard.
    """

    def __init__(self, console=None, lines=None):
        if console is None:
            console = Console(theme=custom_theme)
        else:
            console.push_theme(custom_theme)
        self.console = console
        self._script = iter(lines) if lines is not None else None
        self.transcript = []
        self.last_input = None
        self.current_turn_output = []

    def write(self, message="", style="text"):
        # markup off: room text and item names are content, not rich markup
        self.console.print(message, style=style, markup=False, highlight=False)
        self.transcript.append(str(message))
        self.current_turn_output.append(str(message))

    def banner(self, lines, title=None):
        text = "\n".join(lines)
        self.console.print(Panel(escape(text), title=escape(title) if title else None, border_style="info", padding=(1, 2)))
        if title:
            self.transcript.append(title)
        self.transcript.extend(lines)
        self.current_turn_output.extend(lines)

    def debug(self, text, title):
        self.console.print(Panel(f"[dim]{escape(text)}[/dim]", title=title, border_style="dim"))

    def read_line(self, prompt=">"):
        """Returns the next input line, or None once input is exhausted."""
        if self._script is not None:
            try:
                line = next(self._script)
            except StopIteration:
                return None
            self.console.print(f"\n[info]{prompt}[/info] {escape(line)}", highlight=False)
        else:
            self.console.print()
            try:
                line = Prompt.ask(f"[info]{prompt}[/info]", console=self.console)
            except EOFError:
                return None
        self.last_input = line
        self.current_turn_output = []
        return line
