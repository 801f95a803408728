from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import SplitResult

from .classifier import Family, Scan, find_unescaped, is_scheme_token
from .errors import ParseError, Reason
from .location import ParsedLocation
from .transports import TransportSet


SHORTHAND_SCHEME = "ssh"
LOCAL_SCHEME = "file"


class LocationExtractor(ABC):
    @abstractmethod
    def extract(self, raw: str, scan: Scan) -> ParsedLocation: ...


def build_extractor(family: Family, transports: Optional[TransportSet] = None) -> LocationExtractor:
    if family is Family.EXPLICIT_SCHEME:
        return ExplicitSchemeExtractor(transports)

    if family is Family.IMPLICIT_SHORTHAND:
        return ShorthandExtractor()

    if family is Family.BARE_PATH:
        return BarePathExtractor()

    raise NotImplementedError(f"Unknown location family {family}.")


class ExplicitSchemeExtractor(LocationExtractor):
    def __init__(self, transports: Optional[TransportSet] = None):
        self.transports = transports

    def extract(self, raw: str, scan: Scan) -> ParsedLocation:
        scheme = raw[: scan.separator]
        if not scheme:
            raise ParseError(raw, Reason.MALFORMED_SCHEME, "empty scheme")
        if not is_scheme_token(scheme):
            raise ParseError(raw, Reason.MALFORMED_SCHEME, "invalid scheme token")
        scheme = scheme.lower()
        if self.transports is not None and not self.transports.valid(scheme):
            raise ParseError(
                raw, Reason.UNKNOWN_TRANSPORT, f"scheme {scheme!r} is not a valid transport"
            )

        rest, _, fragment = raw[scan.body :].partition("#")
        query = ""
        question = find_unescaped(rest, "?")
        if question != -1:
            rest, query = rest[:question], rest[question + 1 :]
        slash = rest.find("/")
        if slash == -1:
            authority, path = rest, ""
        else:
            authority, path = rest[:slash], rest[slash:]

        return ParsedLocation.from_url(SplitResult(scheme, authority, path, query, fragment))


class ShorthandExtractor(LocationExtractor):
    def extract(self, raw: str, scan: Scan) -> ParsedLocation:
        authority = raw[: scan.separator]
        if not authority.rpartition("@")[2]:
            raise ParseError(raw, Reason.MALFORMED_SHORTHAND, "no host before ':'")

        path = raw[scan.body :]
        query = ""
        question = find_unescaped(path, "?")
        if question != -1:
            path, query = path[:question], path[question + 1 :]

        # Built as ssh://[user@]host/path[?query]; a relative path stays relative
        return ParsedLocation.from_url(SplitResult(SHORTHAND_SCHEME, authority, path, query, ""))


class BarePathExtractor(LocationExtractor):
    def extract(self, raw: str, scan: Scan) -> ParsedLocation:
        return ParsedLocation.from_url(SplitResult(LOCAL_SCHEME, "", raw[scan.body :], "", ""))
