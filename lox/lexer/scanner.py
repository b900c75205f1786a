"""
Lox Scanner - turns source text into tokens

Single pass, one character of lookahead (two for the decimal point in
numbers). Whitespace and comments are consumed without producing tokens.
Malformed lexemes are reported and skipped, never raised, so callers see
every lexical error from one scan.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Mapping, Optional, Tuple

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS
)
from .errors import Diagnostic, ErrorKind, LexerError

logger = logging.getLogger(__name__)

# Receives (line, message) for every lexical error
Reporter = Callable[[int, str], None]


@dataclass(frozen=True)
class ScanResult:
    """Tokens from one scan plus the diagnostics raised along the way."""
    tokens: Tuple[Token, ...]
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def _is_alpha_numeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Construct one per source string and call scan_tokens(). Calling it
    again rescans from the beginning and yields the same result.
    """

    def __init__(
        self,
        source: str,
        keywords: Mapping[str, TokenType] = KEYWORDS,
        reporter: Optional[Reporter] = None,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            keywords: Reserved-word table used to classify identifiers
            reporter: Optional callable invoked with (line, message) per error
        """
        self._source = source
        self._keywords = keywords
        self._reporter = reporter
        self._tokens: List[Token] = []
        self._diagnostics: List[Diagnostic] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> ScanResult:
        """
        Scan the entire source.

        Returns:
            ScanResult whose tokens end with END_OF_INPUT
        """
        self._tokens = []
        self._diagnostics = []
        self._start = 0
        self._current = 0
        self._line = 1

        logger.debug("Scanning %d characters", len(self._source))

        while not self._is_at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenType.END_OF_INPUT, "", None, self._line))

        logger.debug("Scan finished: %d tokens, %d errors",
                     len(self._tokens), len(self._diagnostics))
        return ScanResult(tuple(self._tokens), tuple(self._diagnostics))

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            long_form, short_form = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(long_form if self._match('=') else short_form)
        elif char == '/':
            if self._match('/'):
                # Comment runs to end of line; the newline is left for the loop
                while self._peek() != '\n' and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in (' ', '\r', '\t'):
            pass
        elif char == '\n':
            self._line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            self._error(ErrorKind.UNEXPECTED_CHARACTER)

    def _string(self):
        start_line = self._line
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._error(ErrorKind.UNTERMINATED_STRING)
            return

        self._advance()  # closing quote

        value = self._source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _number(self):
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' with no digit after it belongs to the next token
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._lexeme()))

    def _identifier(self):
        while _is_alpha_numeric(self._peek()):
            self._advance()

        token_type = self._keywords.get(self._lexeme(), TokenType.IDENTIFIER)
        self._add_token(token_type)

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end():
            return False
        if self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return '\0'
        return self._source[self._current + 1]

    def _advance(self) -> str:
        char = self._source[self._current]
        self._current += 1
        return char

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _lexeme(self) -> str:
        return self._source[self._start:self._current]

    def _add_token(self, token_type: TokenType, literal=None, line: Optional[int] = None):
        self._tokens.append(Token(
            token_type,
            self._lexeme(),
            literal,
            self._line if line is None else line,
        ))

    def _error(self, kind: ErrorKind):
        diagnostic = Diagnostic.of(kind, self._line)
        self._diagnostics.append(diagnostic)
        logger.debug("%s at line %d (%s)", kind.name, self._line, kind.code)
        if self._reporter is not None:
            self._reporter(diagnostic.line, diagnostic.message)


def scan(source: str, reporter: Optional[Reporter] = None) -> ScanResult:
    """Scan `source` with a fresh Scanner and the default keyword table."""
    return Scanner(source, reporter=reporter).scan_tokens()


def tokenize_string(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens

    Raises:
        LexerError: If the scan reported any error
    """
    result = scan(source)

    if result.has_errors:
        raise LexerError(result.diagnostics)

    return list(result.tokens)


def tokenize_file(filepath: str, encoding: str = 'utf-8') -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If the scan reported any error
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return tokenize_string(source)
