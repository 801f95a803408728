from argparse import ArgumentParser
from dataclasses import replace
from json import dumps
import sys
from typing import NoReturn, Optional

from dotenv import load_dotenv

from .classifier import classify
from .config import load_settings
from .errors import ParseError
from .location import ParsedLocation
from .parser import Parser
from .remote import detect_platform, open_repo, project_namespace


version = "0.1.0"
program = "git-remote-url"


def main(argv: Optional[list[str]] = None):
    parser = ArgumentParser(prog=program, description="Normalize Git remote locations.")
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {version}"
    )
    parser.add_argument("locations", nargs="*", metavar="LOCATION")
    parser.add_argument("-r", "--remote", action="append", default=[])
    parser.add_argument("--all-remotes", action="store_true")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--redact", action="store_true")
    parser.add_argument("--platform", action="store_true")
    parser.add_argument("--max-length", type=int)
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)

    load_dotenv()

    location_parser = build_location_parser(args.max_length)

    sources = [(location, location) for location in args.locations]
    if args.remote or args.all_remotes:
        sources += collect_remote_urls(args.remote, args.all_remotes)

    if not sources:
        fail("Nothing to parse. Pass a location, --remote or --all-remotes.")

    results = []
    failures = 0
    for label, raw in sources:
        try:
            location = location_parser.parse(raw)
        except ParseError as parse_error:
            error(str(parse_error))
            failures += 1
            continue

        if args.verbose:
            debug(f"{label}: {classify(raw).value}")

        if args.redact:
            location = location.redacted()
            if label == raw:
                label = location.geturl()

        results.append(describe_location(label, location, args.platform))

    if args.json:
        print(dumps(results, indent=2))
    else:
        for result in results:
            print(format_description(result))

    if failures:
        fail(f"{failures} location(s) could not be parsed.")


def build_location_parser(max_length: Optional[int]) -> Parser:
    try:
        settings = load_settings()
    except ValueError as config_error:
        fail(str(config_error))

    if max_length is not None:
        if max_length < 0:
            fail(f"--max-length must not be negative, got {max_length}.")
        settings = replace(settings, max_length=max_length or None)

    return settings.build_parser()


def collect_remote_urls(names: list[str], all_remotes: bool) -> list[tuple[str, str]]:
    try:
        repo = open_repo()
    except RuntimeError as repo_error:
        fail(str(repo_error))

    if all_remotes:
        remotes = list(repo.remotes)
    else:
        remotes = []
        for name in names:
            try:
                remotes.append(repo.remote(name))
            except ValueError:
                fail(f"Remote {name} does not exist.")

    return [(remote.name, remote.url) for remote in remotes]


def describe_location(label: str, location: ParsedLocation, platform: bool) -> dict:
    description = {"input": label, **location.as_dict(), "url": location.geturl()}
    if location.port is not None:
        description["port"] = location.port
    if not location.is_local:
        description["namespace"] = project_namespace(location)
    if platform:
        description["platform"] = detect_platform(location)
    return description


def format_description(description: dict) -> str:
    lines = [description["input"]]
    for key, value in description.items():
        if key == "input" or value is None:
            continue
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def fail(message: str) -> NoReturn:
    raise SystemExit(f"{program} error: {message}")


def error(message: str):
    print(f"{program} error: {message}", file=sys.stderr)


def debug(message: str):
    print(f"{program} debug: {message}", file=sys.stderr)
