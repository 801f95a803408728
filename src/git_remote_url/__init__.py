from .classifier import Family, classify
from .errors import ParseError, Reason
from .location import Credential, ParsedLocation
from .parser import Parser, parse
from .transports import DEFAULT_TRANSPORTS, TransportSet

__all__ = [
    "DEFAULT_TRANSPORTS",
    "Credential",
    "Family",
    "ParseError",
    "ParsedLocation",
    "Parser",
    "Reason",
    "TransportSet",
    "classify",
    "parse",
]
