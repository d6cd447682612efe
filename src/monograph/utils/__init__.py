"""Common utility functions for monograph."""

from monograph.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
