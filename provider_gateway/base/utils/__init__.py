"""Small, side-effect-free helpers shared by provider adapters."""

from .messages import collapse_role, map_history
from .shapes import MalformedBody, ShapeMatch, extract_text, field_matcher, parse_json
from .stealth import apply_stealth, encode_message
from .urls import join_endpoint

__all__ = [
    "MalformedBody",
    "ShapeMatch",
    "apply_stealth",
    "collapse_role",
    "encode_message",
    "extract_text",
    "field_matcher",
    "join_endpoint",
    "map_history",
    "parse_json",
]
