"""Shared helpers for print-table-lib."""

from pt_common.api import PTError, configure_logging, error_to_payload

__all__ = ["configure_logging", "error_to_payload", "PTError"]
