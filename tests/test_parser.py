import unittest

from aventura.errors import UnrecognizedCommand
from aventura.parser import CommandKind, parse_command, tokenize


class TestTokenize(unittest.TestCase):
    def test_punctuation_is_a_separator(self):
        self.assertEqual(tokenize("  pegar,,chave!! "), ["pegar", "chave"])

    def test_underscore_is_a_separator(self):
        self.assertEqual(tokenize("sala_de_estar"), ["sala", "de", "estar"])

    def test_accented_letters_stay_in_the_word(self):
        self.assertEqual(tokenize("ir direção"), ["ir", "direção"])

    def test_empty(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   ?! "), [])


class TestParseCommand(unittest.TestCase):
    def test_keyword_and_argument_are_lowercased(self):
        cmd = parse_command("IR Norte")
        self.assertEqual(cmd.kind, CommandKind.GO)
        self.assertEqual(cmd.argument, "norte")
        self.assertEqual(cmd.raw_argument, "Norte")

    def test_argument_is_second_word(self):
        for line, expected in [
            ("pegar chave", "chave"),
            ("pegar...chave, agora", "chave"),
            ("ir-norte-rapido", "norte"),
            ("olhar", None),
            ("  olhar   ", None),
        ]:
            with self.subTest(line=line):
                self.assertEqual(parse_command(line).argument, expected)

    def test_lowercase_before_splitting(self):
        # "İ" lowercases to "i" plus a combining dot, which is not a letter.
        cmd = parse_command("ir İ")
        self.assertEqual(cmd.argument, "i")
        self.assertEqual(cmd.raw_argument, "İ")

    def test_extra_words_are_dropped(self):
        cmd = parse_command("pegar a chave velha")
        self.assertEqual(cmd.kind, CommandKind.TAKE)
        self.assertEqual(cmd.argument, "a")

    def test_quit(self):
        self.assertEqual(parse_command("sair").kind, CommandKind.QUIT)
        self.assertEqual(parse_command("SAIR agora").kind, CommandKind.QUIT)

    def test_every_keyword(self):
        for kind in CommandKind:
            with self.subTest(kind=kind):
                self.assertEqual(parse_command(kind.value).kind, kind)

    def test_unknown_keyword(self):
        with self.assertRaises(UnrecognizedCommand) as ctx:
            parse_command("dançar agora")
        self.assertEqual(ctx.exception.keyword, "dançar")

    def test_empty_line(self):
        for line in ["", "   ", "!!!"]:
            with self.subTest(line=line):
                with self.assertRaises(UnrecognizedCommand):
                    parse_command(line)


if __name__ == '__main__':
    unittest.main()
