"""Turns Monkey source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from .token import Token, TokenType

_SINGLE = {
    ord("+"): TokenType.PLUS,
    ord("-"): TokenType.MINUS,
    ord("*"): TokenType.ASTERISK,
    ord("/"): TokenType.SLASH,
    ord("<"): TokenType.LT,
    ord(">"): TokenType.GT,
    ord(","): TokenType.COMMA,
    ord(";"): TokenType.SEMICOLON,
    ord("("): TokenType.LPAREN,
    ord(")"): TokenType.RPAREN,
    ord("{"): TokenType.LBRACE,
    ord("}"): TokenType.RBRACE,
}

_KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

_WHITESPACE = frozenset(b" \t\n\r")
_LETTERS = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_DIGITS = frozenset(b"0123456789")
_EQUALS = ord("=")
_BANG = ord("!")


class Lexer:
    """Reads source text byte by byte and hands out tokens on demand."""

    def __init__(self, source: str) -> None:
        self._data = source.encode("utf-8")
        self._pos = 0

    def _byte(self, offset: int = 0) -> int:
        index = self._pos + offset
        return self._data[index] if index < len(self._data) else 0

    def _scan(self, allowed: frozenset[int]) -> str:
        start = self._pos
        while self._byte() in allowed:
            self._pos += 1
        return self._data[start:self._pos].decode("ascii")

    def next_token(self) -> Token:
        """Return the next token; at the end of input this is always EOF."""
        while self._byte() in _WHITESPACE:
            self._pos += 1

        ch = self._byte()
        if ch in _LETTERS:
            word = self._scan(_LETTERS)
            keyword = _KEYWORDS.get(word)
            return Token(keyword) if keyword else Token(TokenType.IDENTIFIER, word)
        if ch in _DIGITS:
            return Token(TokenType.INT, self._scan(_DIGITS))

        if ch == _EQUALS or ch == _BANG:
            if self._byte(1) == _EQUALS:
                self._pos += 1
                token_type = TokenType.EQ if ch == _EQUALS else TokenType.NEQ
            else:
                token_type = TokenType.ASSIGN if ch == _EQUALS else TokenType.BANG
        elif ch == 0:
            token_type = TokenType.EOF
        else:
            token_type = _SINGLE.get(ch, TokenType.ILLEGAL)

        self._pos += 1
        return Token(token_type)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until EOF, which is not yielded."""
        while (token := self.next_token()).type is not TokenType.EOF:
            yield token


def tokenize(source: str) -> list[Token]:
    """Return the tokens of ``source``, without the trailing EOF."""
    return list(Lexer(source))