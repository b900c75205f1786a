"""
Lox Lexer Package

Lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Single-pass, one-character lookahead scanning
- Number and string literals (multi-line strings allowed)
- Line comments
- Error recovery: every lexical error in a source is reported in one pass
- Line tracking for diagnostics
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, ScanResult, scan, tokenize_string, tokenize_file
from .errors import Diagnostic, ErrorKind, LexerError

__all__ = [
    "Scanner",
    "ScanResult",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "ErrorKind",
    "LexerError",
]
