"""
Prompt surface used during configuration and directory preparation.

The resolver only needs three question types. Every method returns None when
the user cancels the prompt session.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")

Validator = Callable[[str], tuple[bool, str | None]]


@dataclass(frozen=True)
class Choice(Generic[T]):
    """An option in a single-select question."""

    value: T
    label: str
    description: str = ""
    disabled: bool = False


class Prompter(Protocol):
    def text(
        self, message: str, *, default: str = "", validate: Validator | None = None
    ) -> str | None: ...

    def select(self, message: str, choices: Sequence[Choice[T]]) -> T | None: ...

    def confirm(self, message: str, *, default: bool = True) -> bool | None: ...
