"""Prompt configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ttyask.keys import KeyMap, resolve_keymap


@dataclass(frozen=True)
class PromptConfig:
    """Settings shared by every prompt an Inquirer renders."""

    keymap: str = "auto"  # "auto", "posix" or "windows"
    color: bool = True

    def key_table(self) -> KeyMap:
        return resolve_keymap(self.keymap)
