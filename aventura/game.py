from enum import Enum

from .commands import Commands
from .errors import TurnError
from .gameio import GameIO
from .parser import CommandKind, parse_command
from .player import Player
from .world import default_world

WELCOME_LINES = [
    "Seu objetivo é encontrar a saída. Use comandos como 'ir norte' ou 'pegar chave'.",
    "Digite 'ajuda' para ver todos os comandos.",
]
VICTORY_MESSAGE = "Parabéns! Você encontrou a saída e venceu o jogo!"
FAREWELL_MESSAGE = "Obrigado por jogar!"


class GameState(Enum):
    RUNNING = "running"
    WON = "won"
    QUIT = "quit"


class Game:
    """
    Owns the world, the player and the io channel for one play session,
    and drives the turn loop: victory check, prompt, read, parse, dispatch.
    """

    def __init__(self, world=None, io=None, debug=False):
        self.world = world or default_world()
        self.io = io or GameIO()
        self.player = Player(self.world.start_room)
        self.commands = Commands(self.world, self.player, self.io)
        self.debug = debug
        self.state = GameState.RUNNING

    def start(self):
        self.io.banner(WELCOME_LINES, title=f"Bem-vindo à {self.world.title}!")
        self.commands.look()

    def check_win(self):
        if self.world.current_room(self.player).is_exit:
            self.io.write("")
            self.io.write(VICTORY_MESSAGE, style="success")
            self.state = GameState.WON
            return True
        return False

    def process_line(self, line):
        """
        Handles one line of input. Returns False when the player asked to quit.
        """
        try:
            command = parse_command(line)
            if command.kind == CommandKind.QUIT:
                return False
            self.commands.execute(command)
        except TurnError as e:
            command = None
            self.io.write(e.message, style="warning")

        if self.debug:
            state = self.player.to_state()
            self.io.debug(
                f"Input: {line!r}\n"
                f"Command: {command!r}\n"
                f"Location: {state['location']}\n"
                f"Inventory: {state['inventory']}",
                title="[DEBUG: Turn]",
            )
        return True

    def run(self):
        self.start()
        while self.state == GameState.RUNNING:
            if self.check_win():
                break

            line = self.io.read_line()
            if line is None or not self.process_line(line):
                self.io.write(FAREWELL_MESSAGE)
                self.state = GameState.QUIT
        return self.state
