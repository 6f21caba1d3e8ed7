from dataclasses import dataclass, field

import pytest

from suikit.utils import is_field_non_empty, pretty_print


@dataclass
class _Request:
    version: str | None = None
    limit: int = 0
    flags: list = field(default_factory=list)


def test_pretty_print_indents_two_spaces(capsys):
    pretty_print({"a": 1, "b": [1, 2]})
    assert capsys.readouterr().out == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}\n'


def test_pretty_print_dataclass(capsys):
    pretty_print(_Request(version="7"))
    out = capsys.readouterr().out
    assert '"version": "7"' in out
    assert '"limit": 0' in out


def test_pretty_print_falls_back_to_text(capsys):
    pretty_print({1})
    assert capsys.readouterr().out == "{1}\n"


def test_pretty_print_scalar(capsys):
    pretty_print(42)
    assert capsys.readouterr().out == "42\n"


@pytest.mark.parametrize(
    "obj, name, expected",
    [
        (_Request(), "version", False),
        (_Request(version="1"), "version", True),
        (_Request(), "limit", False),
        (_Request(limit=5), "limit", True),
        (_Request(), "missing", False),
        (_Request(), "flags", True),
        ({"version": "3"}, "version", True),
        ({"version": ""}, "version", False),
        ({}, "version", False),
    ],
)
def test_is_field_non_empty(obj, name, expected):
    assert is_field_non_empty(obj, name) is expected