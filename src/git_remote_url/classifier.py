"""Decide which grammar a remote location string is written in.

Every decision is taken from the positions of a handful of separator
characters located with `str.find`, so classification is linear in the
length of the input whatever it contains.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ParseError, Reason


FILE_PREFIX = "file://"


class Family(Enum):
    EXPLICIT_SCHEME = "explicit-scheme"
    IMPLICIT_SHORTHAND = "implicit-shorthand"
    BARE_PATH = "bare-path"


@dataclass(frozen=True)
class Scan:
    family: Family
    # Index of the ':' ending the scheme token or splitting host from path, -1 for bare paths
    separator: int
    # Index where the part following the separator (or the bare path) begins
    body: int


def scan(raw: str) -> Scan:
    if not raw:
        raise ParseError(raw, Reason.EMPTY_INPUT)

    colon = raw.find(":")
    if colon == -1:
        return Scan(Family.BARE_PATH, -1, 0)

    # 1. scheme:// with no "/" ahead of the scheme token
    if raw.startswith("//", colon + 1) and raw.find("/") == colon + 1:
        if colon == len("file") and raw[:colon].lower() == "file":
            if raw.startswith("/", colon + 3):
                return Scan(Family.BARE_PATH, -1, len(FILE_PREFIX))
        return Scan(Family.EXPLICIT_SCHEME, colon, colon + 3)

    # 2. [user@]host:path
    separator = find_shorthand_separator(raw, colon)
    if separator != -1:
        return Scan(Family.IMPLICIT_SHORTHAND, separator, separator + 1)

    # 3. anything else is a local path
    return Scan(Family.BARE_PATH, -1, 0)


def classify(raw: str) -> Family:
    return scan(raw).family


def find_shorthand_separator(raw: str, colon: int) -> int:
    slash = raw.find("/")

    # [host:port]:path keeps its inner colons
    bracket = raw.find("[", 0, colon)
    if bracket != -1 and (slash == -1 or bracket < slash):
        close = raw.find("]", bracket)
        if close != -1:
            colon = raw.find(":", close)
            if colon == -1:
                return -1

    if slash != -1 and slash < colon:
        return -1

    if colon + 1 == len(raw):
        return -1

    # host:1234 is a port without a path, not a path
    end = slash if slash != -1 else len(raw)
    segment = raw[colon + 1 : end]
    if segment and segment.isascii() and segment.isdigit():
        return -1

    return colon


def find_unescaped(text: str, char: str) -> int:
    index = text.find(char)
    while index != -1 and is_escaped(text, index):
        index = text.find(char, index + 1)
    return index


def is_escaped(text: str, index: int) -> bool:
    # an odd run of backslashes escapes the character, an even one escapes itself
    start = index
    while start > 0 and text[start - 1] == "\\":
        start -= 1
    return (index - start) % 2 == 1


def is_scheme_token(token: str) -> bool:
    if not token or not token.isascii() or not token[0].isalpha():
        return False
    rest = token.replace("+", "").replace("-", "").replace(".", "")
    return rest.isalnum()
