from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import SplitResult


@dataclass(frozen=True)
class Credential:
    username: str
    password: Optional[str] = None

    def __str__(self) -> str:
        if self.password is None:
            return self.username
        return f"{self.username}:{self.password}"


@dataclass(frozen=True)
class ParsedLocation:
    """Canonical form of a remote location.

    `host` keeps an explicit port verbatim (``host.xz:1234``); `query` and
    `fragment` are raw, undecoded text. Reserialization goes through
    `urllib.parse.SplitResult`, so relative shorthand paths come back as
    ``ssh://host/path`` while `path` itself stays relative.
    """

    scheme: str
    host: str
    path: str
    credential: Optional[Credential] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    @classmethod
    def from_url(cls, url: SplitResult) -> "ParsedLocation":
        credential, host = split_userinfo(url.netloc)
        return cls(
            scheme=url.scheme,
            host=host,
            path=url.path,
            credential=credential,
            query=url.query or None,
            fragment=url.fragment or None,
        )

    @property
    def netloc(self) -> str:
        if self.credential is None:
            return self.host
        return f"{self.credential}@{self.host}"

    @property
    def hostname(self) -> str:
        host = self.host
        if host.startswith("["):
            end = host.find("]")
            return host[1:end] if end != -1 else host[1:]
        name, colon, port = host.rpartition(":")
        if colon and (not port or port.isascii() and port.isdigit()):
            return name
        return host

    @property
    def port(self) -> Optional[int]:
        host = self.host
        if host.startswith("["):
            host = host[host.find("]") + 1 :]
        _, colon, port = host.rpartition(":")
        if colon and port and port.isascii() and port.isdigit():
            return int(port)
        return None

    @property
    def is_local(self) -> bool:
        return self.scheme == "file" and not self.host

    def to_url(self) -> SplitResult:
        return SplitResult(
            self.scheme, self.netloc, self.path, self.query or "", self.fragment or ""
        )

    def geturl(self) -> str:
        return self.to_url().geturl()

    def redacted(self, mask: str = "***") -> "ParsedLocation":
        if self.credential is None or self.credential.password is None:
            return self
        return replace(self, credential=replace(self.credential, password=mask))

    def without_credential(self) -> "ParsedLocation":
        return replace(self, credential=None)

    def as_dict(self) -> dict[str, Optional[str]]:
        return {
            "scheme": self.scheme,
            "user": self.credential.username if self.credential else None,
            "password": self.credential.password if self.credential else None,
            "host": self.host,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
        }

    def __str__(self) -> str:
        return self.geturl()


def split_userinfo(authority: str) -> tuple[Optional[Credential], str]:
    userinfo, at, host = authority.rpartition("@")
    if not at:
        return None, authority
    username, colon, password = userinfo.partition(":")
    return Credential(username, password if colon else None), host
