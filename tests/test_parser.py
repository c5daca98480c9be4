from core.commands import CommandSpec, LiveCandidates, StaticCandidates, aliases
from core.interface.parser import build_usage, current_token, ends_with_space, tokenize


def _spec(generators, fixed):
    return CommandSpec(generators, fixed, lambda tokens: "")


def test_tokenize_collapses_whitespace():
    assert tokenize("  add   foo\tbar ") == ["add", "foo", "bar"]


def test_tokenize_blank_line():
    assert tokenize("") == []
    assert tokenize("    ") == []


def test_ends_with_space():
    assert ends_with_space("tele ")
    assert not ends_with_space("tele")
    assert not ends_with_space("")


def test_current_token():
    assert current_token("get al") == "al"
    assert current_token("get ") == ""
    assert current_token("") == ""


def test_usage_joins_canonical_aliases_of_fixed_positions():
    spec = _spec([aliases("math", "calc"),
                  StaticCandidates([("add", "plus"), ("sub", "minus")]),
                  aliases("x"), aliases("y")], 2)
    assert build_usage(spec) == "math add/sub <arg> <arg>"


def test_usage_uses_placeholder_for_live_candidates():
    spec = _spec([aliases("unset", "del"), LiveCandidates(lambda: ["a", "b"])], 2)
    assert build_usage(spec) == "unset <arg>"
    assert build_usage(spec, placeholder="var") == "unset <var>"


def test_usage_of_single_token_command():
    assert build_usage(_spec([aliases("list")], 1)) == "list"
