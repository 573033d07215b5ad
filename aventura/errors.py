class AdventureError(Exception):
    """Base class for every error raised by the engine."""


class TurnError(AdventureError):
    """
    A recoverable problem with the player's command.
    The message is shown to the player and the game carries on.
    """
    message = "Algo deu errado."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnrecognizedCommand(TurnError):
    message = "Não entendi esse comando. Digite 'ajuda' para ver as opções."

    def __init__(self, keyword=None):
        self.keyword = keyword
        super().__init__()


class InvalidExit(TurnError):
    message = "Você não pode ir por esse caminho."

    def __init__(self, direction=None):
        self.direction = direction
        super().__init__()


class LockedExit(TurnError):
    def __init__(self, direction, required_item):
        self.direction = direction
        self.required_item = required_item
        super().__init__(f"A porta está trancada. Você precisa de um(a) {required_item}.")


class ItemNotPresent(TurnError):
    def __init__(self, item_name):
        self.item_name = item_name
        super().__init__(f"Não há '{item_name or ''}' aqui.")


class UnknownRoom(AdventureError):
    """The player points at a room the world does not have. Never recoverable."""

    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__(f"Unknown room: {room_id!r}")


class WorldConfigError(AdventureError):
    """World content is broken (dangling exit, missing start room, ...)."""

    def __init__(self, problems):
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        super().__init__("Invalid world definition:\n" + "\n".join(f"  - {p}" for p in self.problems))
