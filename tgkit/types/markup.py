"""Reply markup: the keyboard base class and custom reply keyboards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class GenericReply:
    """Base of all keyboard-related reply options."""


@dataclass
class ReplyKeyboardMarkup(GenericReply):
    """A custom keyboard with reply options, given as rows of buttons."""

    keyboard: list[list[Any]] = field(default_factory=list)
    resize_keyboard: bool = False
    one_time_keyboard: bool = False
    selective: bool = False