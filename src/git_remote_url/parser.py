from typing import Optional

from .classifier import Family, scan
from .errors import ParseError, Reason
from .extractors import build_extractor
from .location import ParsedLocation
from .transports import TransportSet


class Parser:
    def __init__(
        self,
        transports: Optional[TransportSet] = None,
        max_length: Optional[int] = None,
    ):
        if max_length is not None and max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")
        # None accepts any well-formed scheme
        self.transports = transports
        self.max_length = max_length
        self.__extractors = {
            family: build_extractor(family, self.transports) for family in Family
        }

    def parse(self, raw: str) -> ParsedLocation:
        if not raw:
            raise ParseError(raw, Reason.EMPTY_INPUT)
        if self.max_length is not None and len(raw) > self.max_length:
            raise ParseError(
                raw,
                Reason.INPUT_TOO_LONG,
                f"{len(raw)} characters, limit is {self.max_length}",
            )

        result = scan(raw)
        return self.__extractors[result.family].extract(raw, result)


default_parser = Parser()


def parse(raw: str) -> ParsedLocation:
    return default_parser.parse(raw)
