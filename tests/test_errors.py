"""
Tests for lexer diagnostics and the raising convenience helpers.
"""

import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer import (
    Diagnostic, ErrorKind, LexerError, TokenType, tokenize_file, tokenize_string
)


class TestDiagnostics(unittest.TestCase):

    def test_error_kind_codes(self):
        self.assertEqual(ErrorKind.UNEXPECTED_CHARACTER.code, "L001")
        self.assertEqual(ErrorKind.UNTERMINATED_STRING.code, "L002")

    def test_diagnostic_from_kind(self):
        diagnostic = Diagnostic.of(ErrorKind.UNTERMINATED_STRING, 7)

        self.assertEqual(diagnostic.line, 7)
        self.assertEqual(diagnostic.message, "Unterminated string")
        self.assertEqual(diagnostic.code, "L002")
        self.assertEqual(str(diagnostic), "[line 7] Error: Unterminated string")

    def test_lexer_error_carries_all_diagnostics(self):
        error = LexerError([
            Diagnostic.of(ErrorKind.UNEXPECTED_CHARACTER, 1),
            Diagnostic.of(ErrorKind.UNTERMINATED_STRING, 4),
        ])

        self.assertEqual(len(error.diagnostics), 2)
        self.assertEqual(error.first.line, 1)
        self.assertEqual(str(error).splitlines(), [
            "[line 1] Error: Unexpected character.",
            "[line 4] Error: Unterminated string",
        ])


class TestTokenizeHelpers(unittest.TestCase):

    def test_tokenize_string_returns_list(self):
        tokens = tokenize_string("var x;")
        self.assertIsInstance(tokens, list)
        self.assertEqual(tokens[-1].type, TokenType.END_OF_INPUT)

    def test_tokenize_string_raises_on_errors(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string('@ "open')

        kinds = [d.kind for d in ctx.exception.diagnostics]
        self.assertEqual(kinds, [ErrorKind.UNEXPECTED_CHARACTER,
                                 ErrorKind.UNTERMINATED_STRING])

    def test_tokenize_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.lox', delete=False,
                                         encoding='utf-8') as f:
            f.write("while (true) print 1;\n")
            path = f.name
        self.addCleanup(os.unlink, path)

        tokens = tokenize_file(path)
        self.assertEqual(tokens[0].type, TokenType.WHILE)
        self.assertEqual(len(tokens), 8)

    def test_tokenize_missing_file(self):
        with self.assertRaises(OSError):
            tokenize_file(os.path.join(tempfile.gettempdir(), "does-not-exist.lox"))


if __name__ == '__main__':
    unittest.main()
