"""Pocket Calendar application package."""

from __future__ import annotations

__all__ = ["main"]


def main() -> None:
    from .ui.app import run_gui

    run_gui()
