import pytest

from core.commands import ResultStatus
from core.interface import Console, load_commands
from core.interface.console import INVALID_ARGUMENT_ERROR, OUT_OF_RANGE_ERROR


@pytest.fixture
def console():
    console = Console()
    load_commands(console.registry, "plugins")
    return console


def _run(console, line):
    return console.submit_command(line)


def test_echo_and_whoami(console):
    assert _run(console, "echo hello   world").message == "hello world"
    assert "@" in _run(console, "user").message


def test_uptime_and_time(console):
    assert _run(console, "uptime").message.startswith("up 00:00:")
    assert _run(console, "now").status is ResultStatus.OK


def test_version_is_a_literal_command(console):
    assert _run(console, "version").message.startswith("tokenline")


def test_exit_leaves_the_console(console):
    with pytest.raises(SystemExit):
        _run(console, "exit")


def test_variables_round_trip(console):
    assert _run(console, "vars").message == "(no variables)"
    assert _run(console, "set hp 100").message == "hp = 100"
    assert _run(console, "let name sir robin").message == "name = sir robin"
    assert _run(console, "print hp").message == "hp = 100"
    assert _run(console, "variables").message == "hp = 100\nname = sir robin"


def test_missing_variable_is_out_of_range(console):
    assert _run(console, "get mana").message == OUT_OF_RANGE_ERROR
    assert _run(console, "set").message == OUT_OF_RANGE_ERROR


def test_unset_only_resolves_existing_names(console):
    assert _run(console, "unset hp").status is ResultStatus.NOT_FOUND
    _run(console, "set hp 1")
    assert _run(console, "del hp").message == "unset hp"
    assert _run(console, "get hp").message == OUT_OF_RANGE_ERROR


def test_variable_names_complete_from_live_store(console):
    _run(console, "set xray 1")
    console.on_text_input("get xr")
    console.autocomplete()
    assert console.typed_line == "get xray "


def test_math(console):
    assert _run(console, "math add 2 3").message == "5"
    assert _run(console, "calc times 2 2.5").message == "5"
    assert _run(console, "math over 1 4").message == "0.25"


def test_math_errors(console):
    assert _run(console, "math add 2").message == OUT_OF_RANGE_ERROR
    assert _run(console, "math add two 3").message == INVALID_ARGUMENT_ERROR
    assert _run(console, "math div 1 0").message == INVALID_ARGUMENT_ERROR
    assert _run(console, "math pow 1 2").status is ResultStatus.NOT_FOUND


def test_math_operations_complete(console):
    console.on_text_input("math mi")
    console.autocomplete()
    assert console.typed_line == "math minus "
