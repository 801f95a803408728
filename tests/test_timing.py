from time import perf_counter

import pytest

from git_remote_url import ParseError, parse


def timed_parse(raw: str) -> float:
    begin = perf_counter()
    try:
        parse(raw)
    except ParseError:
        pass
    return perf_counter() - begin


@pytest.mark.parametrize(
    "build",
    [
        lambda n: "https://=" + "/" * n,
        lambda n: "host.xz:" + "/" * n,
        lambda n: "a" + ":" * n,
        lambda n: "@" * n + ":repo.git",
        lambda n: "host.xz:" + "\\?" * n,
        lambda n: "[" * n + ":repo.git",
        lambda n: "git@host.xz:" + "?" * n,
        lambda n: "x" * n + "://host.xz/repo.git",
        lambda n: "/" * n,
    ],
)
def test_parse_time_is_linear(build):
    small = timed_parse(build(10_000))
    large = timed_parse(build(1_000_000))

    assert small < 0.1
    assert large < max(1.0, small * 100 * 5)


def test_long_input_still_parses():
    location = parse("https://=" + "/" * 7900)
    assert location.scheme == "https"
    assert location.host == "="
    assert location.path == "/" * 7900


def test_common_urls_parse_quickly():
    for raw in (
        "https://stackoverflow.com/q/417142/31319",
        "https://kinesis-ergo.com/wp-content/uploads/Advantage360-SmartSet-KB360-Users-Manual-v10-12-22.pdf",
    ):
        assert timed_parse(raw) < 0.1
