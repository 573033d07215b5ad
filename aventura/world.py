import yaml

from .errors import UnknownRoom, WorldConfigError
from .parser import tokenize

# Default world, shipped with the game.
DEFAULT_WORLD = {
    'title': 'Mini Aventura de Texto',
    'start_room': 'quarto',
    'rooms': {
        'quarto': {
            'description': "Você está em um quarto empoeirado. Há uma cama desarrumada e uma pequena cômoda.\n"
                           "Uma porta ao norte leva para fora.",
            'exits': {'norte': 'corredor'},
            'items': ['chave'],
        },
        'corredor': {
            'description': "Você está em um corredor estreito. Há uma porta a oeste e outra ao sul.",
            'exits': {'sul': 'quarto', 'oeste': 'sala_de_estar'},
        },
        'sala_de_estar': {
            'description': "Esta é a sala de estar. Um sofá velho está contra a parede.\n"
                           "Uma grande porta de madeira ao norte parece ser a saída, mas está trancada.",
            'exits': {'leste': 'corredor', 'norte': 'jardim'},
            'items': ['lanterna'],
            'locked': {'norte': 'chave'},
        },
        'jardim': {
            'description': "Você conseguiu abrir a porta e chegou ao jardim. O ar fresco indica que você está livre!",
            'is_exit': True,
        },
    },
}


def _key(value):
    # Parser tokens are lowercase, so item and direction ids are stored lowercase too.
    return str(value).lower()


def _is_word(value):
    return tokenize(value) == [value]


def _check_fields(room_id, data):
    if not isinstance(data, dict):
        return [f"room '{room_id}' must be a mapping"]
    problems = []
    for field in ('exits', 'locked'):
        if data.get(field) is not None and not isinstance(data[field], dict):
            problems.append(f"'{field}' of room '{room_id}' must be a mapping")
    if data.get('items') is not None and not isinstance(data['items'], list):
        problems.append(f"'items' of room '{room_id}' must be a list")
    return problems


class Room:
    def __init__(self, id, data):
        self.id = id
        self.description = data.get('description', "")
        self.exits = {_key(d): str(target) for d, target in (data.get('exits') or {}).items()}
        self.items = [_key(i) for i in (data.get('items') or [])]
        self.locked = {_key(d): _key(item) for d, item in (data.get('locked') or {}).items()}
        self.is_exit = bool(data.get('is_exit', False))

    def exit_names(self):
        return sorted(self.exits)

    def required_item(self, direction):
        return self.locked.get(direction)

    def has_item(self, item_id):
        return item_id in self.items

    def add_item(self, item_id):
        self.items.append(item_id)

    def remove_item(self, item_id):
        # First occurrence only.
        if item_id in self.items:
            self.items.remove(item_id)

    def __repr__(self):
        return f"Room(id={self.id!r})"


class World:
    """
    The static room graph. Topology never changes after load;
    only the item lists of the rooms do.
    """

    def __init__(self, data):
        if not isinstance(data, dict):
            raise WorldConfigError("world definition must be a mapping")
        rooms = data.get('rooms')
        if not isinstance(rooms, dict) or not rooms:
            raise WorldConfigError("world defines no rooms")

        self.title = data.get('title', 'Untitled')
        self.start_room = data.get('start_room')
        self.rooms = {}
        problems = []
        for room_id, room_data in rooms.items():
            room_problems = _check_fields(room_id, room_data)
            if room_problems:
                problems.extend(room_problems)
                continue
            self.rooms[str(room_id)] = Room(str(room_id), room_data)
        if problems:
            raise WorldConfigError(problems)

        self.validate()

    def validate(self):
        problems = []
        if self.start_room not in self.rooms:
            problems.append(f"start room '{self.start_room}' does not exist")

        for room in self.rooms.values():
            for direction, target in room.exits.items():
                if target not in self.rooms:
                    problems.append(f"exit '{direction}' of room '{room.id}' leads to unknown room '{target}'")
            for direction in room.locked:
                if direction not in room.exits:
                    problems.append(f"room '{room.id}' locks '{direction}', which is not one of its exits")

            # Ids the parser can never produce would make an exit or item unreachable.
            for direction in room.exits:
                if not _is_word(direction):
                    problems.append(f"direction '{direction}' in room '{room.id}' is not a single word")
            for item in room.items + list(room.locked.values()):
                if not _is_word(item):
                    problems.append(f"item '{item}' in room '{room.id}' is not a single word")

        victory = [r.id for r in self.rooms.values() if r.is_exit]
        if len(victory) != 1:
            problems.append(f"expected exactly one victory room, found {len(victory)}")

        if problems:
            raise WorldConfigError(problems)

    def get_room(self, room_id):
        try:
            return self.rooms[room_id]
        except KeyError:
            raise UnknownRoom(room_id) from None

    def current_room(self, player):
        return self.get_room(player.location)


def load_world(path):
    """
    Loads a world definition from a YAML file.
    Same shape as DEFAULT_WORLD: title, start_room and a 'rooms' mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise WorldConfigError(f"could not parse {path}: {e}") from e
    return World(data)


def default_world():
    # Rooms copy their lists, so every call gets a fresh, untouched world.
    return World(DEFAULT_WORLD)
