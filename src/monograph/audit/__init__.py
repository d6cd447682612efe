"""Audit logging for algorithm runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: one audit line
- generate_run_id: run identifier factory
"""

from monograph.audit.helpers import generate_run_id
from monograph.audit.logger import AuditLogger
from monograph.audit.models import LEVELS, LogEvent

__all__ = ["LEVELS", "AuditLogger", "LogEvent", "generate_run_id"]
