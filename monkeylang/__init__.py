"""Tokens and lexer for the Monkey programming language."""

__version__ = "0.1.0"
__all__ = ["__version__"]