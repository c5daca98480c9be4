from types import SimpleNamespace

from prompt_toolkit.application.current import set_app

from core.commands import aliases
from core.interface import BaseCLI, Console, build_key_bindings, run_repl
from core.interface.console import NOT_FOUND_LINE
from core.ui import strip_ansi


class ScriptedCLI(BaseCLI):
    def __init__(self, console, lines):
        super().__init__(console)
        self._lines = list(lines)
        self.shown = []

    def get_line(self):
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def show(self, text):
        self.shown.append(strip_ansi(text))


def _quit(tokens):
    raise SystemExit(0)


def _console():
    console = Console()
    console.register_command([aliases("heal")], 1, lambda tokens: "healed\nfully")
    console.register_legacy_command("quit", _quit)
    return console


def test_repl_prints_results_without_echo():
    console = _console()
    cli = ScriptedCLI(console, ["heal", "", "xyz"])

    assert run_repl(console, cli) == 0
    assert cli.shown == ["healed", "fully", NOT_FOUND_LINE]
    assert console.history.entries == ("heal", "xyz")


def test_repl_stops_on_exit_command():
    console = _console()
    cli = ScriptedCLI(console, ["quit", "heal"])

    assert run_repl(console, cli) == 0
    assert cli.shown == []
    assert cli._lines == ["heal"]


class _Buffer:
    def __init__(self, completions):
        self.complete_state = SimpleNamespace(completions=completions) if completions else None
        self.cancelled = False

    def cancel_completion(self):
        self.cancelled = True
        self.complete_state = None


class _App:
    def __init__(self, completions=()):
        self.current_buffer = _Buffer(list(completions))
        self.exit_exception = None

    def exit(self, exception=None):
        self.exit_exception = exception


def _press(kb, key, app):
    with set_app(app):
        active = [b for b in kb.bindings if b.keys == (key,) and b.filter()]
        assert len(active) == 1
        active[0].handler(SimpleNamespace(app=app))


def test_escape_dismisses_completion_menu_before_closing():
    console = _console()
    console.set_open(True)
    kb = build_key_bindings(console)

    with_menu = _App(completions=["heal"])
    _press(kb, "escape", with_menu)
    assert with_menu.current_buffer.cancelled
    assert console.is_open
    assert with_menu.exit_exception is None

    without_menu = _App()
    _press(kb, "escape", without_menu)
    assert not console.is_open
    assert isinstance(without_menu.exit_exception, EOFError)


def test_f10_toggle_ends_session_when_hidden():
    console = _console()
    kb = build_key_bindings(console)

    app = _App()
    _press(kb, "f10", app)
    assert console.is_open
    assert app.exit_exception is None

    _press(kb, "f10", app)
    assert not console.is_open
    assert isinstance(app.exit_exception, EOFError)


def test_repl_colors_only_failed_results(monkeypatch):
    console = _console()
    console.register_command([aliases("boom")], 1, lambda tokens: 1 / 0)
    cli = ScriptedCLI(console, ["heal", "boom"])
    raw = []
    monkeypatch.setattr(cli, "show", raw.append)
    monkeypatch.setattr("core.interface.cli.colorize", lambda text, color: f"<{color}>{text}")

    run_repl(console, cli)
    assert raw == ["healed", "fully", "<red>error: command failed"]
