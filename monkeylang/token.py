"""Tokens produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """The kinds of token in the Monkey language."""

    ILLEGAL = "Illegal"
    EOF = "EOF"

    IDENTIFIER = "Identifier"
    INT = "Int"

    # Operators
    ASSIGN = "Assign"
    PLUS = "Plus"
    MINUS = "Minus"
    BANG = "Bang"
    ASTERISK = "Asterisk"
    SLASH = "Slash"

    LT = "Lt"
    GT = "Gt"
    EQ = "Eq"
    NEQ = "Neq"

    # Delimiters
    COMMA = "Comma"
    SEMICOLON = "Semicolon"

    LPAREN = "LParen"
    RPAREN = "RParen"
    LBRACE = "LBrace"
    RBRACE = "RBrace"

    # Keywords
    FUNCTION = "Function"
    LET = "Let"
    TRUE = "True"
    FALSE = "False"
    IF = "If"
    ELSE = "Else"
    RETURN = "Return"


_LITERAL_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.INT})

_DISPLAY = {
    TokenType.ILLEGAL: "ILLEGAL",
    TokenType.EOF: "EOF",
    TokenType.ASSIGN: "=",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.BANG: "!",
    TokenType.ASTERISK: "*",
    TokenType.SLASH: "/",
    TokenType.LT: "<",
    TokenType.GT: ">",
    TokenType.EQ: "==",
    TokenType.NEQ: "!=",
    TokenType.COMMA: ",",
    TokenType.SEMICOLON: ";",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.FUNCTION: "fn",
    TokenType.LET: "let",
    TokenType.TRUE: "true",
    TokenType.FALSE: "false",
    TokenType.IF: "if",
    TokenType.ELSE: "else",
    TokenType.RETURN: "return",
}


@dataclass(frozen=True)
class Token:
    """A token; identifiers and integers carry their source text in ``literal``."""

    type: TokenType
    literal: str = ""

    def __str__(self) -> str:
        if self.type in _LITERAL_TYPES:
            return self.literal
        return _DISPLAY[self.type]

    def __repr__(self) -> str:
        if self.type in _LITERAL_TYPES:
            return f'{self.type.value}("{self.literal}")'
        return self.type.value