#!/usr/bin/env python3
"""
Main test runner for the Lox scanner tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run a smoke scan, then every test module under tests/."""

    print("Lox Scanner Test Suite")
    print("=" * 60)

    try:
        from lox.lexer import scan, TokenType
        print("Scanner modules imported successfully")
    except ImportError as e:
        print(f"Failed to import scanner modules: {e}")
        return False

    print("Testing a small program...")
    code = """
    fun fib(n) {
        if (n <= 1) return n;
        return fib(n - 2) + fib(n - 1);
    }
    print fib(10.0); // 55
    """
    result = scan(code)
    print(f"  Generated {len(result.tokens)} tokens, {len(result.diagnostics)} errors")
    if result.has_errors or result.tokens[-1].type is not TokenType.END_OF_INPUT:
        print("  Smoke scan FAILED")
        return False
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    outcome = unittest.TextTestRunner(verbosity=2).run(suite)
    return outcome.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
