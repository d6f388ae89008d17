from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_LOG_AUTHOR


@dataclass(frozen=True)
class ShiftLogEntry:
    """Free-text shift note; independent of employees."""

    entry_id: str
    timestamp: str
    text: str
    author: str = DEFAULT_LOG_AUTHOR
