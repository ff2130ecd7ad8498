"""
================================================================================
Soft Results
================================================================================

Outcome type for operations that must never abort a test run (settings
loading, screenshot capture). Callers decide whether a degraded outcome is
worth surfacing.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SoftResult:
    """
    Success/degraded outcome of a best-effort operation.

    Attributes:
        ok: True when the operation fully succeeded
        value: Produced value (path, source name, ...) if any
        error: Human-readable failure reason when degraded
    """
    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "SoftResult":
        return cls(ok=True, value=value)

    @classmethod
    def degraded(cls, error: str, value: Any = None) -> "SoftResult":
        return cls(ok=False, value=value, error=error)

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    "SoftResult",
]
