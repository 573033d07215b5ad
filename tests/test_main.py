import io
import os
import tempfile
import unittest
from unittest import mock

from rich.console import Console

import main
from aventura.gameio import custom_theme

WORLD_YAML = """
start_room: a
rooms:
  a: {description: Sala A., exits: {leste: b}}
  b: {description: Sala B., is_exit: true}
"""


class TestMain(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.out = io.StringIO()
        patcher = mock.patch.object(main, "console", Console(file=self.out, width=120, theme=custom_theme))
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_build_world_defaults_to_builtin(self):
        world = main.build_world({'world_file': None})
        self.assertEqual(world.start_room, "quarto")

    def test_plays_world_file(self):
        path = os.path.join(self.tmpdir.name, "w.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(WORLD_YAML)
        config = {'world_file': path, 'debug_mode': False}
        with mock.patch.object(main, "load_config", return_value=config), \
                mock.patch("aventura.gameio.Prompt.ask", side_effect=["ir leste"]):
            main.main()
        self.assertIn("Parabéns! Você encontrou a saída e venceu o jogo!", self.out.getvalue())

    def test_missing_world_file_exits(self):
        config = {'world_file': os.path.join(self.tmpdir.name, "nope.yaml")}
        with mock.patch.object(main, "load_config", return_value=config):
            with self.assertRaises(SystemExit) as ctx:
                main.main()
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("World file not found", self.out.getvalue())

    def test_broken_world_exits(self):
        path = os.path.join(self.tmpdir.name, "w.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write("start_room: a\nrooms:\n  a: {exits: {norte: z}}\n")
        with mock.patch.object(main, "load_config", return_value={'world_file': path}):
            with self.assertRaises(SystemExit):
                main.main()
        self.assertIn("unknown room 'z'", self.out.getvalue())

    def test_ctrl_c_says_goodbye(self):
        with mock.patch.object(main, "load_config", return_value={'world_file': None}), \
                mock.patch("aventura.gameio.Prompt.ask", side_effect=KeyboardInterrupt):
            main.main()
        self.assertIn("Obrigado por jogar!", self.out.getvalue())


if __name__ == '__main__':
    unittest.main()
