"""Signature tokenizer: lexes signature and type text into a flat token list."""

from __future__ import annotations


# Token type constants
TK_IDENT = "IDENT"
TK_OP = "OP"
TK_EOF = "EOF"

# Identifiers the parser treats as markers; they still lex as TK_IDENT
KEYWORDS: set[str] = {
    "inout",
    "mutating",
    "rethrows",
    "throws",
}

# Multi-character operators, matched before single-character ones
MULTI_OPS: list[str] = [
    "->",
]

SINGLE_OPS: set[str] = {
    "(",
    ")",
    "[",
    "]",
    "<",
    ">",
    ",",
    ":",
    ".",
    "?",
    "!",
    "@",
    "&",
    "=",
}


class SwiftSyntaxError(Exception):
    """Malformed signature or type text.

    offset is the 0-based character index into the parsed string where the
    problem was detected.
    """

    def __init__(self, msg: str, offset: int):
        self.msg: str = msg
        self.offset: int = offset
        super().__init__(msg + " at offset " + str(offset))


class Token:
    """A token with type, value, and character offset."""

    def __init__(self, type_: str, value: str, offset: int):
        self.type: str = type_
        self.value: str = value
        self.offset: int = offset

    def __repr__(self) -> str:
        return "Token(" + self.type + ", " + repr(self.value) + ", " + str(self.offset) + ")"


def _is_digit(c: str) -> bool:
    return c >= "0" and c <= "9"


def _is_alpha(c: str) -> bool:
    return (c >= "a" and c <= "z") or (c >= "A" and c <= "Z") or c == "_"


def _is_alnum(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


def tokenize(source: str) -> list[Token]:
    """Tokenize signature text. Whitespace separates tokens and is dropped.

    The returned list always ends with a TK_EOF token positioned at
    len(source).
    """
    tokens: list[Token] = []
    pos = 0
    n = len(source)
    while pos < n:
        c = source[pos]
        if c in " \t\r\n":
            pos += 1
            continue
        if _is_alpha(c):
            start = pos
            while pos < n and _is_alnum(source[pos]):
                pos += 1
            tokens.append(Token(TK_IDENT, source[start:pos], start))
            continue
        matched = False
        for op in MULTI_OPS:
            if source.startswith(op, pos):
                tokens.append(Token(TK_OP, op, pos))
                pos += len(op)
                matched = True
                break
        if matched:
            continue
        if c in SINGLE_OPS:
            tokens.append(Token(TK_OP, c, pos))
            pos += 1
            continue
        raise SwiftSyntaxError("unexpected character '" + c + "'", pos)
    tokens.append(Token(TK_EOF, "", n))
    return tokens
