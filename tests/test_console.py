import pytest

from core.commands import ResultStatus, aliases
from core.interface.console import (
    COMMAND_FAILED_ERROR,
    ECHO_PREFIX,
    INVALID_ARGUMENT_ERROR,
    NOT_FOUND_LINE,
    OUT_OF_RANGE_ERROR,
    Console,
    Key,
)


def _raising(exc):
    def callback(tokens):
        raise exc
    return callback


@pytest.fixture
def console():
    console = Console()
    console.register_command([aliases("heal")], 1, lambda tokens: "healed")
    console.register_command([aliases("kill")], 1, lambda tokens: "killed")
    return console


def test_exact_match_runs_callback_after_echo(console):
    result = console.submit_command("heal")

    assert result.status is ResultStatus.OK
    assert result.message == "healed"
    assert console.output[:2] == ["healed", ECHO_PREFIX + "heal"]
    # index 0 is the built-in list command
    assert console.registry.resolve_exact(["heal"]) == 1


def test_unknown_line_reports_not_found(console):
    result = console.submit_command("xyz")

    assert result.status is ResultStatus.NOT_FOUND
    assert not result.found
    assert console.output[0] == NOT_FOUND_LINE
    assert console.output[1] == ECHO_PREFIX + "xyz"


def test_callback_receives_all_tokens():
    console = Console()
    seen = []
    console.register_command([aliases("say")], 1, lambda tokens: seen.append(tokens) or "")
    console.submit_command("say  hello   world")
    assert seen == [["say", "hello", "world"]]


@pytest.mark.parametrize("exc, message", [
    (IndexError("list index out of range"), OUT_OF_RANGE_ERROR),
    (KeyError("hp"), OUT_OF_RANGE_ERROR),
    (ValueError("not a number"), INVALID_ARGUMENT_ERROR),
    (RuntimeError("boom"), COMMAND_FAILED_ERROR),
])
def test_callback_failures_become_error_lines(exc, message):
    console = Console()
    console.register_command([aliases("bad")], 1, _raising(exc))

    result = console.submit_command("bad")
    assert result.status is ResultStatus.ERROR
    assert result.message == message
    assert console.output[0] == message


def test_system_exit_propagates():
    console = Console()
    console.register_legacy_command("quit", _raising(SystemExit(0)))
    with pytest.raises(SystemExit):
        console.submit_command("quit")


def test_legacy_longest_prefix_is_used(console):
    console.register_legacy_command("tele", lambda tokens: "tele")
    console.register_legacy_command("teleport", lambda tokens: "teleport")

    assert console.submit_command("teleport town").message == "teleport"
    assert console.submit_command("tele town").message == "tele"


def test_legacy_errors_are_mapped_too(console):
    console.register_legacy_command("spawn", _raising(ValueError("nope")))
    assert console.submit_command("spawn orc").message == INVALID_ARGUMENT_ERROR


def test_empty_line_is_ignored(console):
    before = console.output_count
    result = console.submit_command("")
    assert result.status is ResultStatus.EMPTY
    assert console.output_count == before


def test_submitted_lines_go_to_history(console):
    console.submit_command("heal")
    console.submit_command("heal")
    console.submit_command("xyz")
    assert console.history.entries == ("heal", "xyz")


def test_typing_autocomplete_and_submit(console):
    console.on_text_input("he")
    console.on_key_event(Key.AUTOCOMPLETE)
    assert console.typed_line == "heal "
    assert [s.match for s in console.last_suggestions] == ["heal"]

    result = console.on_key_event(Key.SUBMIT)
    assert result.message == "healed"
    assert console.typed_line == ""


def test_backspace_removes_last_character(console):
    console.on_text_input("abc")
    console.on_key_event(Key.BACKSPACE)
    assert console.typed_line == "ab"
    console.typed_line = ""
    console.on_key_event(Key.BACKSPACE)
    assert console.typed_line == ""


def test_history_keys_restore_typed_line(console):
    console.submit_command("heal")
    console.on_text_input("dr")

    console.on_key_event(Key.HISTORY_UP)
    assert console.typed_line == "heal"
    console.on_key_event(Key.HISTORY_DOWN)
    assert console.typed_line == "dr"


def test_visibility_keys(console):
    assert not console.is_open
    console.on_key_event(Key.TOGGLE)
    assert console.is_open
    console.on_key_event(Key.CLOSE)
    assert not console.is_open
    console.on_key_event(Key.CLOSE)
    assert not console.is_open


def test_render_frame_windows_newest_output():
    console = Console(height=2, banner="welcome")
    assert console.output == ["welcome"]
    console.register_command([aliases("heal")], 1, lambda tokens: "healed")
    console.submit_command("heal")
    console.on_text_input("ki")

    frame = console.render_frame()
    assert frame.prompt == "ki"
    assert frame.lines == ["healed", ECHO_PREFIX + "heal"]
    assert console.visible_output(5) == ["healed", ECHO_PREFIX + "heal", "welcome"]


def test_list_command_outputs_one_line_per_command(console):
    console.register_legacy_command("teleport", lambda tokens: "")
    result = console.submit_command("list")

    assert result.message == "list\nheal\nkill\nteleport"
    # last line of a multi-line result is the newest output line
    assert console.output[:5] == ["teleport", "kill", "heal", "list", ECHO_PREFIX + "list"]


def test_list_command_shows_usage_of_free_positions():
    console = Console()
    console.register_command([aliases("give", "g"), aliases("gold"), aliases("amount")], 2,
                             lambda tokens: "")
    result = console.submit_command("list")
    assert result.message == "list\ngive gold <arg>"
