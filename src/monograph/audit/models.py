"""Audit event record."""

import json
from dataclasses import asdict, dataclass, field
from typing import Any

__all__ = ["LEVELS", "LogEvent"]

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass(frozen=True)
class LogEvent:
    """One line of the audit trail.

    Attributes
    ----------
    ts : str
        UTC timestamp, ISO8601 with a ``Z`` suffix.
    run_id : str
        Run the event belongs to.
    level : str
        One of ``LEVELS``.
    event : str
        Event type, e.g. ``"algorithm_finished"``.
    data : dict[str, Any]
        Event payload.
    stage : str | None
        Algorithm (or ``"run"``) active when the event was written.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any] = field(default_factory=dict)
    stage: str | None = None

    def to_json(self) -> str:
        """Serialize to a single compact JSON line (no trailing newline).

        Values JSON cannot represent (paths, vertices of arbitrary type) are
        written with ``str()``.
        """
        return json.dumps(asdict(self), ensure_ascii=False, separators=(",", ":"), default=str)
