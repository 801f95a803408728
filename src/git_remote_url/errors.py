from enum import Enum


class Reason(str, Enum):
    EMPTY_INPUT = "empty-input"
    MALFORMED_SCHEME = "malformed-scheme"
    MALFORMED_SHORTHAND = "malformed-shorthand"
    UNKNOWN_TRANSPORT = "unknown-transport"
    INPUT_TOO_LONG = "input-too-long"


class ParseError(ValueError):
    def __init__(self, raw: str, reason: Reason, detail: str = ""):
        self.raw = raw
        self.reason = reason
        self.detail = detail
        super().__init__(self.__describe())

    def __describe(self) -> str:
        shown = self.raw if len(self.raw) <= 80 else f"{self.raw[:77]}..."
        message = f"cannot parse {shown!r} ({self.reason.value})"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message
