import os

import yaml
from dotenv import load_dotenv

CONFIG_PATH = "config.yaml"

DEFAULT_CONFIG_YAML = """
# MINI AVENTURA CONFIGURATION
# ---------------------------
# world_file: path to a YAML world. Leave empty to play the built-in world.

world_file:
debug_mode: false
"""

DEFAULTS = {
    'world_file': None,
    'debug_mode': False,
}

TRUE_VALUES = ("1", "true", "yes", "on")


def load_config(config_path=None):
    """
    Loads config.yaml or creates default if missing.
    Values from the environment (and a .env file) win over the file:
    AVENTURA_CONFIG picks the file, AVENTURA_WORLD and AVENTURA_DEBUG
    override world_file and debug_mode.
    """
    load_dotenv()
    config_path = config_path or os.getenv("AVENTURA_CONFIG", CONFIG_PATH)

    if not os.path.exists(config_path):
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_YAML.strip() + "\n")

    with open(config_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    config = dict(DEFAULTS)
    config.update(loaded)

    if os.getenv("AVENTURA_WORLD"):
        config['world_file'] = os.getenv("AVENTURA_WORLD")
    if os.getenv("AVENTURA_DEBUG"):
        config['debug_mode'] = os.getenv("AVENTURA_DEBUG").lower() in TRUE_VALUES

    return config
