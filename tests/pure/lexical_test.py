import types
import unittest

from rlisp.lang.error import LexError
from rlisp.pure.lexical import EOF, LClose, LOpen, Number, StrLit, Symbol, get_token, tokenize, tokens


class TokenTestCase(unittest.TestCase):

    def test_eq(self):
        self.assertEqual(LOpen(), LOpen())
        self.assertEqual(Number("12"), Number(12.0))
        self.assertNotEqual(StrLit("x"), Symbol("x"))
        self.assertNotEqual(LOpen(), LClose())

    def test_immutable(self):
        for token in [Symbol("x"), Number(1), StrLit("s"), LOpen()]:
            with self.assertRaises(AttributeError):
                token.value = "y"

    def test_number_is_float(self):
        self.assertIsInstance(Number("3").value, float)


class TokenizeTestCase(unittest.TestCase):

    def test_delimiters(self):
        cases = {
            "()": [LOpen(), LClose()],
            "(+ 1 (- 4 2))": [LOpen(), Symbol("+"), Number(1), LOpen(), Symbol("-"), Number(4), Number(2), LClose(),
                              LClose()],
            "abc)": [Symbol("abc"), LClose()],
            "(a(b)c)": [LOpen(), Symbol("a"), LOpen(), Symbol("b"), LClose(), Symbol("c"), LClose()],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)

    def test_empty(self):
        should_pass = ["", "   ", "\n\t  \r\n"]
        for case in should_pass:
            self.assertEqual([], tokenize(case), repr(case))

    def test_numbers(self):
        cases = {
            "42": [Number(42)],
            "-5": [Number(-5)],
            "+7": [Number(7)],
            "3.25": [Number(3.25)],
            "-0.5": [Number(-0.5)],
            "5.": [Number(5)],
            "12abc": [Number(12), Symbol("abc")],
            "1 2": [Number(1), Number(2)],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)

    def test_signs_without_digits_are_symbols(self):
        cases = {
            "-": [Symbol("-")],
            "+": [Symbol("+")],
            "- 5": [Symbol("-"), Number(5)],
            "+x": [Symbol("+x")],
            ".5": [Symbol(".5")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)

    def test_non_ascii_digits_are_symbols(self):
        cases = {
            "²": [Symbol("²")],
            "-²": [Symbol("-²")],
            "(+ 1 ٣)": [LOpen(), Symbol("+"), Number(1), Symbol("٣"), LClose()],
            "1٣": [Number(1), Symbol("٣")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)

    def test_number_out_of_range(self):
        should_raise = ["1" + "0" * 400, "(-" + "9" * 400 + ")"]
        for case in should_raise:
            with self.assertRaises(LexError) as context:
                tokenize(case)
            self.assertTrue(context.exception.reason.startswith("number literal out of range"))

    def test_symbols(self):
        cases = {
            "lambda": [Symbol("lambda")],
            "foo-bar?": [Symbol("foo-bar?")],
            "a\"b\"": [Symbol("a"), StrLit("b")],
            "x1": [Symbol("x1")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)

    def test_strings(self):
        cases = {
            "\"hello world\"": [StrLit("hello world")],
            "'single'": [StrLit("single")],
            "\"it's\"": [StrLit("it's")],
            "'say \"hi\"'": [StrLit("say \"hi\"")],
            "\"a\\\"b\"": [StrLit("a\"b")],
            "'it\\'s'": [StrLit("it's")],
            "\"a\\nb\\tc\"": [StrLit("a\nb\tc")],
            "\"back\\\\slash\"": [StrLit("back\\slash")],
            "\"\"": [StrLit("")],
            "(\"x\")": [LOpen(), StrLit("x"), LClose()],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)

    def test_unterminated(self):
        should_raise = ["\"abc", "'abc\"", "(a 'b)", "\"abc\\"]
        for case in should_raise:
            self.assertRaises(LexError, tokenize, case)

        with self.assertRaises(LexError) as context:
            tokenize("\"abc\\")
        self.assertIn("escape", context.exception.reason)

        with self.assertRaises(LexError) as context:
            tokenize("\"abc")
        self.assertIn("unterminated string", context.exception.reason)

    def test_tokens_is_lazy(self):
        stream = tokens("( \"unterminated")
        self.assertIsInstance(stream, types.GeneratorType)
        self.assertEqual(LOpen(), next(stream))
        self.assertRaises(LexError, next, stream)

    def test_get_token_eof(self):
        token, pos = get_token("abc", 3)
        self.assertEqual(EOF(), token)
        self.assertEqual(3, pos)


if __name__ == '__main__':
    unittest.main()
