"""History mapping helpers shared across provider adapters.

Providers disagree on role vocabulary (``assistant`` vs ``model`` vs
``CHATBOT``) and on the name of the content field. These helpers translate the
normalized history once, side-effect free, so each adapter only declares its
vocabulary.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from ..models import HistoryMessage


def collapse_role(message: HistoryMessage, *, assistant: str, user: str) -> str:
    """Map a history role onto a two-role vocabulary.

    ``assistant`` turns map to ``assistant``; every other role (including
    unexpected ones such as ``system``) maps to ``user``.
    """
    return assistant if message.is_assistant else user


def map_history(
    history: Iterable[HistoryMessage],
    build: Callable[[HistoryMessage], Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """Apply ``build`` to each history message, preserving order."""
    return [build(m) for m in history]


__all__ = ["collapse_role", "map_history"]
