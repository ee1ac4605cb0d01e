"""
Message - stock warning built from a string
===========================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from .config import get_settings


@dataclass(frozen=True, slots=True, eq=False)
class Message:
    """
    Immutable warning carrying a plain text message.

    Compares by identity: two messages with the same text are
    still two distinct warnings.
    """

    message: str

    def __str__(self) -> str:
        return self.message

    def to_json(self) -> str:
        """Encode as a JSON string literal."""
        return json.dumps(self.message, ensure_ascii=get_settings().json_ensure_ascii)


__all__ = ("Message",)
