from dataclasses import dataclass
from os import getenv
from typing import Optional

from .parser import Parser
from .transports import TransportSet


DEFAULT_MAX_LENGTH = 65536

MAX_LENGTH_VARIABLE = "GIT_REMOTE_URL_MAX_LENGTH"
TRANSPORTS_VARIABLE = "GIT_REMOTE_URL_TRANSPORTS"


@dataclass(frozen=True)
class Settings:
    max_length: Optional[int] = DEFAULT_MAX_LENGTH
    transports: tuple[str, ...] = ()

    def build_parser(self) -> Parser:
        if not self.transports:
            return Parser(max_length=self.max_length)
        return Parser(TransportSet(self.transports), self.max_length)


def load_settings() -> Settings:
    """Read settings from the environment.

    `GIT_REMOTE_URL_MAX_LENGTH` caps the accepted input length (``0`` disables
    the cap) and `GIT_REMOTE_URL_TRANSPORTS`, when set, restricts explicit URLs
    to the comma-separated transports it lists.
    """
    return Settings(
        max_length=get_max_length(),
        transports=get_transports(),
    )


def get_max_length() -> Optional[int]:
    value = (getenv(MAX_LENGTH_VARIABLE) or "").strip()
    if not value:
        return DEFAULT_MAX_LENGTH
    try:
        max_length = int(value)
    except ValueError:
        raise ValueError(f"{MAX_LENGTH_VARIABLE} must be an integer, got {value!r}.")
    if max_length < 0:
        raise ValueError(f"{MAX_LENGTH_VARIABLE} must not be negative, got {max_length}.")
    return max_length or None


def get_transports() -> tuple[str, ...]:
    value = getenv(TRANSPORTS_VARIABLE) or ""
    return tuple(
        transport.strip().lower() for transport in value.split(",") if transport.strip()
    )
