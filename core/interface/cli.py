#!/usr/bin/env python3
# core/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (Tab completion, history recall, live suggestions)
    2) plain input (stdin is not a terminal, e.g. piped scripts)

Both feed lines into a Console; the console owns history and matching.
"""

import sys

from core.commands import ResultStatus
from core.interface.completion import format_suggestions, suggest
from core.interface.console import Console, Key
from core.interface.parser import current_token
from core.ui import colorize, print_line

DEFAULT_PROMPT = "> "


class BaseCLI:
    """
    A line source for `run_repl`.

    `get_line()` returns one submitted line and raises EOFError when input ends.
    Used as a context manager; frontends that show the console open it in
    setup() and teardown() closes it even when the loop raises.
    """

    def __init__(self, console: Console, *, prompt: str = DEFAULT_PROMPT) -> None:
        self.console = console
        self.prompt = prompt

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def get_line(self) -> str:  # pragma: no cover - interface
        ...

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    def show(self, text: str) -> None:
        print_line(text)

    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class PlainCLI(BaseCLI):
    """Line reader without editing features."""

    def get_line(self) -> str:
        return input(self.prompt)


def build_key_bindings(console: Console):
    """
    prompt_toolkit key bindings that drive the console:

        Tab      autocomplete the line and print the ranked suggestions
        Up/Down  history recall (menu navigation while completions show)
        F10      toggle the console; hiding it ends the session
        Escape   dismiss the completion menu, else close the console
    """
    from prompt_toolkit.application import run_in_terminal
    from prompt_toolkit.filters import has_completions
    from prompt_toolkit.key_binding import KeyBindings

    kb = KeyBindings()

    def _drive(buffer, key: Key) -> None:
        console.typed_line = buffer.text
        console.on_key_event(key)
        buffer.text = console.typed_line
        buffer.cursor_position = len(buffer.text)

    def _visibility(event, key: Key) -> None:
        console.on_key_event(key)
        if not console.is_open:
            # a hidden console ends the session like Ctrl-D
            event.app.exit(exception=EOFError())

    @kb.add("tab")
    def _(event):
        buffer = event.app.current_buffer
        buffer.cancel_completion()
        _drive(buffer, Key.AUTOCOMPLETE)
        listing = format_suggestions(console.last_suggestions)
        if listing:
            run_in_terminal(lambda: print_line(colorize(listing, "bright_black")))

    @kb.add("f10")
    def _(event):
        _visibility(event, Key.TOGGLE)

    @kb.add("escape", filter=has_completions)
    def _(event):
        event.app.current_buffer.cancel_completion()

    @kb.add("escape", filter=~has_completions)
    def _(event):
        _visibility(event, Key.CLOSE)

    @kb.add("up", filter=~has_completions)
    def _(event):
        _drive(event.app.current_buffer, Key.HISTORY_UP)

    @kb.add("down", filter=~has_completions)
    def _(event):
        _drive(event.app.current_buffer, Key.HISTORY_DOWN)

    return kb


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Rich line editor wired to the console's completion and history."""

    def __init__(
        self,
        console: Console,
        *,
        prompt: str = DEFAULT_PROMPT,
        complete_while_typing: bool = True,
    ) -> None:
        super().__init__(console, prompt=prompt)
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion

        registry = console.registry

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                replace_len = len(current_token(text_before_cursor))
                for word in suggest(registry, text_before_cursor):
                    # replace exactly the current token
                    yield Completion(word, start_position=-replace_len)

        self._session = PromptSession(
            completer=_Completer() if complete_while_typing else None,
            complete_while_typing=complete_while_typing,
            key_bindings=build_key_bindings(console),
        )

    def setup(self) -> None:
        self.console.set_open(True)

    def get_line(self) -> str:
        return self._session.prompt(self.prompt)

    def teardown(self) -> None:
        self.console.set_open(False)


def make_cli(console: Console, *, prompt: str = DEFAULT_PROMPT, enable_completion: bool = True) -> BaseCLI:
    """
    Factory to select the best frontend for the current stdin.
    """
    if sys.stdin.isatty():
        return PromptToolkitCLI(console, prompt=prompt,
                                complete_while_typing=enable_completion)
    return PlainCLI(console, prompt=prompt)


def run_repl(console: Console, cli: BaseCLI) -> int:
    """
    Read, submit and print until EOF, Ctrl-C or an exit command.

    The echo line is not printed again since the prompt already shows it.
    """
    with cli:
        while True:
            try:
                line = cli.get_line()
            except (EOFError, KeyboardInterrupt):
                return 0

            console.typed_line = line
            before = console.output_count
            try:
                result = console.on_key_event(Key.SUBMIT)
            except SystemExit:
                return 0
            if result is None or result.status is ResultStatus.EMPTY:
                continue

            added = console.recent_output(console.output_count - before)
            for text in reversed(added[:-1]):
                if result.ok:
                    cli.show(text)
                else:
                    cli.show(colorize(text, "red"))
