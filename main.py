import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from aventura.config import load_config
from aventura.errors import WorldConfigError
from aventura.game import FAREWELL_MESSAGE, Game
from aventura.gameio import GameIO, custom_theme
from aventura.world import default_world, load_world

console = Console(theme=custom_theme)


def build_world(config):
    world_file = config.get('world_file')
    if world_file:
        return load_world(world_file)
    return default_world()


# ============================================
# MAIN
# ============================================
def main():
    config = load_config()

    try:
        world = build_world(config)
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: World file not found.[/] Missing file: {escape(str(e.filename))}", border_style="warning"))
        sys.exit(1)
    except WorldConfigError as e:
        console.print(Panel(f"[warning]WORLD ERROR:[/]\n" + "\n".join(escape(p) for p in e.problems), border_style="warning"))
        sys.exit(1)

    game = Game(world, io=GameIO(console), debug=config.get('debug_mode', False))
    try:
        game.run()
    except KeyboardInterrupt:
        console.print(f"\n{FAREWELL_MESSAGE}")


if __name__ == "__main__":
    main()
