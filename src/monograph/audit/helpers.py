"""Run identifiers for audit trails."""

import secrets

from monograph.utils import get_iso_timestamp

__all__ = ["generate_run_id"]


def generate_run_id() -> str:
    """Return a new run identifier, ``<utc timestamp>__<8 hex chars>``.

    The timestamp prefix keeps ids sortable by start time; the suffix keeps
    runs started in the same microsecond apart.
    """
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"
