from typing import Iterable


# https://git-scm.com/docs/git-clone#_git_urls
DEFAULT_TRANSPORTS = (
    "ssh",
    "git",
    "git+ssh",
    "http",
    "https",
    "ftp",
    "ftps",
    "rsync",
    "file",
)


class TransportSet:
    def __init__(self, transports: Iterable[str] = DEFAULT_TRANSPORTS):
        self.transports = frozenset(transport.lower() for transport in transports)

    def valid(self, transport: str) -> bool:
        return transport.lower() in self.transports

    def extend(self, transports: Iterable[str]) -> "TransportSet":
        return TransportSet([*self.transports, *transports])

    def __contains__(self, transport: object) -> bool:
        return isinstance(transport, str) and self.valid(transport)

    def __iter__(self):
        return iter(sorted(self.transports))

    def __repr__(self) -> str:
        return f"TransportSet({sorted(self.transports)!r})"
