# plugins/vars/entrypoint.py
from __future__ import annotations

from typing import Callable

from core.commands import CommandRegistry, LiveCandidates, StaticCandidates, aliases

# canonical operation -> aliases
OPERATIONS: dict[str, tuple[str, ...]] = {
    "add": ("add", "plus"),
    "sub": ("sub", "minus"),
    "mul": ("mul", "times"),
    "div": ("div", "over"),
}

_APPLY: dict[str, Callable[[float, float], float]] = {
    "add": lambda a, b: a + b,
    "sub": lambda a, b: a - b,
    "mul": lambda a, b: a * b,
    "div": lambda a, b: a / b,
}


class VariableStore:
    """Named string values owned by one registration."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def names(self) -> list[str]:
        return sorted(self._values)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def get(self, name: str) -> str:
        # KeyError surfaces as "argument out of range"
        return self._values[name]

    def unset(self, name: str) -> None:
        del self._values[name]

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._values.items())


def _operand(text: str) -> float:
    # ValueError surfaces as "invalid argument"
    return float(text)


def _canonical_operation(alias: str) -> str:
    for name, spellings in OPERATIONS.items():
        if alias in spellings:
            return name
    raise ValueError(f"unknown operation {alias!r}")


def register(registry: CommandRegistry, store: VariableStore | None = None) -> VariableStore:
    store = store if store is not None else VariableStore()
    variable_names = LiveCandidates(store.names)

    # ---------- set ----------
    @registry.command(aliases("set", "let"), variable_names, fixed=1)
    def set_variable(tokens: list[str]) -> str:
        name = tokens[1]
        value = " ".join(tokens[2:])
        store.set(name, value)
        return f"{name} = {value}"

    # ---------- get ----------
    @registry.command(aliases("get", "print"), variable_names, fixed=1)
    def get_variable(tokens: list[str]) -> str:
        return f"{tokens[1]} = {store.get(tokens[1])}"

    # ---------- unset (only resolves for existing names) ----------
    @registry.command(aliases("unset", "del"), variable_names)
    def unset_variable(tokens: list[str]) -> str:
        store.unset(tokens[1])
        return f"unset {tokens[1]}"

    # ---------- vars ----------
    @registry.command(aliases("vars", "variables"))
    def list_variables(tokens: list[str]) -> str:
        items = store.items()
        if not items:
            return "(no variables)"
        return "\n".join(f"{name} = {value}" for name, value in items)

    # ---------- math ----------
    @registry.command(aliases("math", "calc"), StaticCandidates(list(OPERATIONS.values())))
    def math(tokens: list[str]) -> str:
        operation = _canonical_operation(tokens[1])
        left, right = _operand(tokens[2]), _operand(tokens[3])
        if operation == "div" and right == 0:
            raise ValueError("division by zero")
        return f"{_APPLY[operation](left, right):g}"

    return store
