from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from giturlparse import parse as parse_git_url

from .location import Credential, ParsedLocation
from .parser import Parser, default_parser

if TYPE_CHECKING:
    from git import Remote, Repo


SSH_TRANSPORTS = ("ssh", "git+ssh")


def open_repo(path: str = ".") -> "Repo":
    # Imported lazily so that parsing never needs a git executable
    from git import Repo
    from git.exc import InvalidGitRepositoryError, NoSuchPathError

    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as error:
        raise RuntimeError(f"Not a Git repository: {path}") from error


def parse_remote(remote: "Remote", parser: Optional[Parser] = None) -> ParsedLocation:
    return (parser or default_parser).parse(remote.url)


def parse_remotes(repo: "Repo", parser: Optional[Parser] = None) -> dict[str, ParsedLocation]:
    return {remote.name: parse_remote(remote, parser) for remote in repo.remotes}


def project_namespace(location: ParsedLocation) -> str:
    return location.path.rstrip("/").removesuffix(".git").removeprefix("/")


def detect_platform(location: ParsedLocation) -> Optional[str]:
    """Name the hosting platform (``github``, ``gitlab``...) serving a location.

    Local locations and URLs giturlparse does not recognize give None.
    """
    if location.is_local:
        return None

    # ssh patterns expect the user, https ones expect no userinfo at all
    if location.credential is not None and location.scheme in SSH_TRANSPORTS:
        location = replace(location, credential=Credential(location.credential.username))
    else:
        location = location.without_credential()

    git_url = parse_git_url(location.geturl())
    if not git_url.valid:
        return None
    return git_url.platform
