import re
from enum import Enum

from .errors import UnrecognizedCommand

# Letters and digits only; underscore counts as a separator.
WORD_RE = re.compile(r"[^\W_]+")


class CommandKind(Enum):
    LOOK = "olhar"
    GO = "ir"
    TAKE = "pegar"
    INVENTORY = "inventario"
    HELP = "ajuda"
    QUIT = "sair"


KEYWORDS = {kind.value: kind for kind in CommandKind}


class Command:
    def __init__(self, kind, argument=None, raw_argument=None):
        self.kind = kind
        self.argument = argument
        # As typed by the player, for echoing back in messages.
        self.raw_argument = raw_argument if raw_argument is not None else argument

    def __repr__(self):
        return f"Command({self.kind.name}, argument={self.argument!r})"


def tokenize(text):
    return WORD_RE.findall(text or "")


def parse_command(text):
    """
    Turns one input line into a Command.
    Only the first two words count: the keyword and its argument.
    Raises UnrecognizedCommand for an empty line or an unknown keyword.
    """
    words = tokenize((text or "").lower())
    if not words:
        raise UnrecognizedCommand()

    keyword = words[0]
    kind = KEYWORDS.get(keyword)
    if kind is None:
        raise UnrecognizedCommand(keyword)

    if len(words) > 1:
        raw_words = tokenize(text)
        raw_argument = raw_words[1] if len(raw_words) > 1 else words[1]
        return Command(kind, words[1], raw_argument)
    return Command(kind)
