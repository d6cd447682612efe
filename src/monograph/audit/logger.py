"""JSONL audit trail for graph algorithm runs.

Every call appends one JSON object per line to the log file and flushes it
immediately, so an interrupted run still leaves a readable trail.
"""

from pathlib import Path
from typing import Any

from monograph.audit.models import LEVELS, LogEvent
from monograph.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """Append-only event writer bound to a single run.

    Algorithms and the runner receive an ``AuditLogger | None``; passing
    None disables logging entirely.

    Attributes
    ----------
    run_id : str
        Identifier stamped on every event.
    log_path : Path
        JSONL file events are appended to.
    current_stage : str | None
        Algorithm in progress, used as the default ``stage`` of events.

    Examples
    --------
        >>> from monograph.audit import AuditLogger, generate_run_id
        >>> with AuditLogger(generate_run_id(), "run.jsonl") as logger:
        ...     logger.run_started("spanning_tree", {"document": "g.json"})
    """

    def __init__(self, run_id: str, log_path: Path | str) -> None:
        """Open ``log_path`` for appending, creating parent directories.

        Parameters
        ----------
        run_id : str
            Run identifier.
        log_path : Path | str
            Destination JSONL file; existing content is kept.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._stream = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """True once the log file has been closed."""
        return self._stream.closed

    def close(self) -> None:
        """Close the log file. Calling it again does nothing."""
        if not self._stream.closed:
            self._stream.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
    ) -> None:
        """Append one event.

        Parameters
        ----------
        event_type : str
            Event name, e.g. ``"run_started"``.
        data : dict[str, Any] | None, optional
            Payload; copied, so later changes by the caller are not logged.
        level : str, optional
            One of ``"DEBUG"``, ``"INFO"``, ``"WARN"``, ``"ERROR"``.
        stage : str | None, optional
            Overrides ``current_stage`` for this event.

        Raises
        ------
        ValueError
            If ``level`` is not a known level.
        """
        if level not in LEVELS:
            raise ValueError(f"level must be one of {LEVELS}, got {level!r}")

        record = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=dict(data or {}),
            stage=self.current_stage if stage is None else stage,
        )
        self._stream.write(record.to_json() + "\n")
        self._stream.flush()

    def run_started(self, command: str, parameters: dict[str, Any]) -> None:
        """Record the start of a run and its configuration."""
        self.event("run_started", {"command": command, "parameters": parameters})

    def run_finished(self, status: str, duration_seconds: float) -> None:
        """Record how a run ended (``"success"`` or ``"failed"``) and its duration."""
        self.event("run_finished", {"status": status, "duration_seconds": duration_seconds})

    def run_error(self, error: str, traceback_text: str | None = None) -> None:
        """Record the error that aborted a run.

        Parameters
        ----------
        error : str
            ``"ExceptionType: message"``.
        traceback_text : str | None, optional
            Formatted traceback, if available.
        """
        data: dict[str, Any] = {"error": error}
        if traceback_text is not None:
            data["traceback"] = traceback_text
        self.event("run_error", data, level="ERROR", stage="run")

    def algorithm_started(self, algorithm: str, **data: Any) -> None:
        """Record an algorithm's input size and make it the current stage.

        Parameters
        ----------
        algorithm : str
            Algorithm name, e.g. ``"dijkstra"``.
        **data : Any
            Input description (vertex and edge counts, source vertex).
        """
        self.current_stage = algorithm
        self.event("algorithm_started", data)

    def algorithm_finished(
        self,
        algorithm: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Record an algorithm's duration and counters, then clear the stage.

        Parameters
        ----------
        algorithm : str
            Algorithm name.
        duration_seconds : float
            Wall-clock time spent in the algorithm.
        counters : dict[str, int] | None, optional
            Work counters such as ``reached`` or ``tree_edges``.
        """
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters

        self.event("algorithm_finished", data, stage=algorithm)
        self.current_stage = None
