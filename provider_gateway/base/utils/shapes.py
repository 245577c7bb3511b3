"""Response shape matching shared by the provider extractors.

A *shape matcher* takes a parsed JSON document and returns the reply text when
it recognizes the layout, or ``None`` when the layout does not apply. A
matcher that recognizes the layout but finds no text returns ``""``. Each
provider declares an ordered tuple of matchers; :func:`extract_text` runs them
in that order, so precedence is explicit rather than a product of dict key
iteration.

Matchers never raise: unexpected types along the path simply mean "not this
shape".
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

ShapeMatcher = Callable[[Any], Optional[str]]

_MISSING = object()


class MalformedBody(ValueError):
    """Raised by :func:`parse_json` when the body is not strict JSON."""


def parse_json(body: str) -> Any:
    """Strictly parse ``body`` as JSON.

    Raises:
        MalformedBody: When the body is empty or not valid JSON.
    """
    if not body or not body.strip():
        raise MalformedBody("empty body")
    try:
        return json.loads(body)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedBody(str(e)) from e


def dig(data: Any, *path: Any) -> Any:
    """Walk ``data`` through dict keys and list indexes.

    Returns the sentinel ``_MISSING`` (see :func:`found`) when any step is absent
    or has the wrong container type.
    """
    cur = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(cur, list) or not -len(cur) <= step < len(cur):
                return _MISSING
            cur = cur[step]
        else:
            if not isinstance(cur, dict) or step not in cur:
                return _MISSING
            cur = cur[step]
    return cur


def found(value: Any) -> bool:
    return value is not _MISSING


def as_text(value: Any) -> Optional[str]:
    """Coerce a recognized field value to text.

    Strings pass through, ``None`` becomes ``""`` and lists of text parts
    (``[{"text": ...}]`` or plain strings) are concatenated. Anything else is
    not text and yields ``None``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        texts = []
        for part in value:
            if isinstance(part, str):
                texts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                texts.append(part["text"])
        return "".join(texts)
    return None


def field_matcher(*path: Any) -> ShapeMatcher:
    """Build a matcher that reads the text found at ``path``."""

    def _match(data: Any) -> Optional[str]:
        value = dig(data, *path)
        return as_text(value) if found(value) else None

    _match.__name__ = "field_" + "_".join(str(p) for p in path)
    return _match


@dataclass(frozen=True)
class ShapeMatch:
    """Outcome of running a matcher list over a parsed body.

    Attributes:
        text: Matched text (possibly empty); ``None`` when no matcher applied.
        matcher: Name of the matcher that recognized the shape.
    """

    text: Optional[str]
    matcher: Optional[str] = None

    @property
    def recognized(self) -> bool:
        return self.text is not None

    @property
    def empty(self) -> bool:
        return not self.text


def extract_text(data: Any, matchers: Sequence[ShapeMatcher]) -> ShapeMatch:
    """Run ``matchers`` in order and return the first recognized shape."""
    for matcher in matchers:
        text = matcher(data)
        if text is not None:
            return ShapeMatch(text=text, matcher=getattr(matcher, "__name__", None))
    return ShapeMatch(text=None)


__all__ = [
    "MalformedBody",
    "ShapeMatch",
    "ShapeMatcher",
    "as_text",
    "dig",
    "extract_text",
    "field_matcher",
    "found",
    "parse_json",
]
