from __future__ import annotations


class SexpaError(Exception):
    """ Base class for all sexpa errors"""
    pass


class SourceUnreadable(SexpaError):
    """ Raised when the source document cannot be read"""


class SexpaSyntaxError(SexpaError):
    """ Raised when the token stream does not form well-nested containers"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class UnsupportedDelimiter(SexpaSyntaxError):
    """ Raised when a container is opened with a character outside ( [ { " '"""


class StackUnderflow(SexpaSyntaxError):
    """ Raised when a closing delimiter has no open container"""


class UnterminatedContainer(SexpaSyntaxError):
    """ Raised when input ends with containers still open"""


class InvalidKey(SexpaError):
    """ Raised when a non-atom is used as an environment key"""


class UnboundAtom(SexpaError):
    """ Raised when an atom is looked up before it is bound"""
