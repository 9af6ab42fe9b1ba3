"""
envx/theme.py
Semantic colors for CLI output.

Supports:
  - NO_COLOR=1 → disable all colors
  - FORCE_COLOR=1 → force colors in pipes
  - ENVX_THEME=minimal → alternative theme

Usage:
    from envx.theme import theme
    console.print(f"[{theme.error}]boom[/{theme.error}]")
"""

from __future__ import annotations

import os


class Theme:
    """Semantic color definitions for consistent CLI appearance."""

    def __init__(self):
        self._no_color = bool(os.environ.get("NO_COLOR"))
        self._force_color = bool(os.environ.get("FORCE_COLOR"))
        self._theme_name = os.environ.get("ENVX_THEME", "default")

        if self._no_color:
            self._apply_no_color()
        elif self._theme_name == "minimal":
            self._apply_minimal()
        else:
            self._apply_default()

    def _apply_default(self):
        self.success = "green"
        self.error = "red"
        self.muted = "dim"

    def _apply_minimal(self):
        self.success = "green"
        self.error = "bold"
        self.muted = "dim"

    def _apply_no_color(self):
        for attr in ("success", "error", "muted"):
            setattr(self, attr, "")

    @property
    def no_color(self) -> bool:
        return self._no_color

    @property
    def force_color(self) -> bool:
        return self._force_color

    def wrap(self, style: str, text: str) -> str:
        """Rich markup for ``text`` in ``style`` (plain text when style is empty)."""
        return f"[{style}]{text}[/{style}]" if style else text


theme = Theme()
