"""
  Tokenizer

Splits source text into tokens, one character at a time:

- every delimiter is a token of its own: { } [ ] ( ) space newline " ' @ ~ `
- the character after a delimiter always starts a new token
- any other run of characters accumulates into a single token
- tokens that are exactly a space, newline or tab are dropped afterwards

Tab is not a delimiter, so "a\tb" stays one token. Tokenizing never fails.
"""

from __future__ import annotations

from dataclasses import dataclass

DELIMITERS = frozenset("{}[]() \n\"'@~`")
WHITESPACE = frozenset((" ", "\n", "\t"))


@dataclass(frozen=True)
class Token:
    text: str
    line: int = 1
    column: int = 1
    offset: int = 0

    def __str__(self):
        return self.text


def tokenize(source: str) -> list[Token]:
    pieces: list[list] = []  # [text, line, column, offset]
    line, column = 1, 1
    for offset, char in enumerate(source):
        if not pieces or pieces[-1][0] in DELIMITERS or char in DELIMITERS:
            pieces.append([char, line, column, offset])
        else:
            pieces[-1][0] += char
        if char == "\n":
            line, column = line + 1, 1
        else:
            column += 1

    return [Token(*piece) for piece in pieces if piece[0] not in WHITESPACE]
