"""
Lox Front End Package

Lexical analysis for Lox, a small dynamically-typed scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokens, keyword table, scanner, diagnostics
    ├── cli.py           # `lox [script]` host: file mode and prompt mode
    └── log.py           # Package logger setup

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, ScanResult, Token, TokenType, scan

__all__ = [
    # Core classes
    "Scanner",
    "ScanResult",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__license__",
]
