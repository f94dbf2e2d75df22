"""Formatting hooks applied to finalized headers, field names and field values."""

from __future__ import annotations

from typing import Callable

FormatHook = Callable[[str], str]


def identity(text: str) -> str:
    return text


def lowercase(text: str) -> str:
    return text.lower()


def uppercase(text: str) -> str:
    return text.upper()


def chain(*hooks: FormatHook | None) -> FormatHook:
    """Compose hooks left to right, skipping ``None`` entries."""
    active = [hook for hook in hooks if hook is not None]
    if not active:
        return identity
    if len(active) == 1:
        return active[0]

    def _chained(text: str) -> str:
        for hook in active:
            text = hook(text)
        return text

    return _chained


def apply_hook(hook: FormatHook | None, text: str) -> str:
    return hook(text) if hook else text


__all__ = ["FormatHook", "identity", "lowercase", "uppercase", "chain", "apply_hook"]
