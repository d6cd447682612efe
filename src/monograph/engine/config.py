"""Run configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

__all__ = ["ALGORITHMS", "RunConfig", "RunResult"]

ALGORITHMS = ("shortest_path", "spanning_tree")


@dataclass
class RunConfig:
    """Configuration for a single algorithm run over a graph document.

    Attributes
    ----------
    algorithm : str
        One of ``ALGORITHMS``.
    source : Any
        Source vertex, required for ``shortest_path``.
    output_path : Path | None
        If set, the JSON result is also written there.
    log_path : Path | None
        If set, audit events are appended to this JSONL file.
    """

    algorithm: str
    source: Any = None
    output_path: Path | None = None
    log_path: Path | None = None

    def __post_init__(self) -> None:
        """Normalize paths and validate."""
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"algorithm must be one of {ALGORITHMS}, got {self.algorithm!r}")

        if self.algorithm == "shortest_path" and self.source is None:
            raise ValueError("source is required for shortest_path")

        if self.output_path is not None:
            self.output_path = Path(self.output_path)

        if self.log_path is not None:
            self.log_path = Path(self.log_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["output_path"] = str(self.output_path) if self.output_path is not None else None
        data["log_path"] = str(self.log_path) if self.log_path is not None else None
        return data


@dataclass
class RunResult:
    """Results from a run.

    Attributes
    ----------
    success : bool
        Whether the run completed.
    algorithm : str
        Algorithm that was run.
    result : dict[str, Any]
        JSON-ready algorithm output (empty on failure).
    output_files : dict[str, str]
        Map of artifact type to file path.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    algorithm: str
    result: dict[str, Any] = field(default_factory=dict)
    output_files: dict[str, str] = field(default_factory=dict)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
