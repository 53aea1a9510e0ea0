from __future__ import annotations

import re

from sexpa.reader.tokenizer import Token
from sexpa.types.atom import Atom, Boolean, Float, Int, Symbol

I64_MIN, I64_MAX = -(2**63), 2**63 - 1

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)

BOOLEANS = {"true": Boolean(True), "false": Boolean(False)}


def infer(token: Token) -> Atom:
    """Classify a token's text: boolean, then integer, then float, else symbol.

    Python's int()/float() accept underscores, surrounding whitespace and
    non-ASCII digits, so the text is matched against the literal grammar first.
    Integers outside the signed 64-bit range fall through to Float.
    """
    text = token.text
    if text in BOOLEANS:
        return BOOLEANS[text]

    if INT_RE.fullmatch(text):
        value = int(text)
        if I64_MIN <= value <= I64_MAX:
            return Int(value)

    if FLOAT_RE.fullmatch(text):
        return Float(float(text))

    return Symbol(text)
