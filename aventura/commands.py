from .errors import InvalidExit, ItemNotPresent, LockedExit, UnrecognizedCommand
from .parser import CommandKind

HELP_LINES = [
    "Comandos disponíveis:",
    "  olhar          - Descreve a sala atual.",
    "  ir [direção]   - Move-se em uma direção (norte, sul, leste, oeste).",
    "  pegar [item]   - Pega um item da sala.",
    "  inventario     - Mostra os itens que você está carregando.",
    "  ajuda          - Mostra esta mensagem de ajuda.",
    "  sair           - Termina o jogo.",
]


class Commands:
    def __init__(self, world, player, io):
        """
        The player's verbs. Each one reads or changes the world and the player
        and reports back through io. A command the player can't carry out raises
        a TurnError; nothing is changed before the error is raised.
        """
        self.world = world
        self.player = player
        self.io = io

    def execute(self, command):
        """Master Router: Command -> handler."""
        kind = command.kind
        if kind == CommandKind.LOOK:
            self.look()
        elif kind == CommandKind.GO:
            self.go(command.argument)
        elif kind == CommandKind.TAKE:
            self.take(command.argument, command.raw_argument)
        elif kind == CommandKind.INVENTORY:
            self.show_inventory()
        elif kind == CommandKind.HELP:
            self.help()
        else:
            # QUIT is handled by the game loop, never routed here.
            raise UnrecognizedCommand(kind.value)

    # --- LOOK ---
    def look(self):
        room = self.world.current_room(self.player)
        self.io.write(room.description)
        if room.items:
            self.io.write("Você vê aqui: " + ", ".join(room.items))
        self.io.write("Saídas disponíveis: " + ", ".join(room.exit_names()), style="info")

    # --- GO ---
    def go(self, direction):
        room = self.world.current_room(self.player)
        if not direction or direction not in room.exits:
            raise InvalidExit(direction)

        required = room.required_item(direction)
        if required:
            if not self.player.has_item(required):
                raise LockedExit(direction, required)
            # The key is only checked, it stays in the inventory.
            self.io.write(f"Você usou o(a) {required} e destrancou a porta.", style="success")

        self.player.move_to(room.exits[direction])
        self.io.write(f"Você foi para {direction}.")
        self.look()

    # --- TAKE ---
    def take(self, item_name, typed_name=None):
        room = self.world.current_room(self.player)
        if not item_name or not room.has_item(item_name):
            raise ItemNotPresent(typed_name if typed_name is not None else item_name)

        self.player.add_item(item_name)
        room.remove_item(item_name)
        self.io.write(f"Você pegou o(a) {item_name}.", style="success")

    # --- INVENTORY ---
    def show_inventory(self):
        if not self.player.inventory:
            self.io.write("Seu inventário está vazio.")
        else:
            self.io.write("Você está carregando: " + ", ".join(self.player.inventory))

    # --- HELP ---
    def help(self):
        for line in HELP_LINES:
            self.io.write(line)
