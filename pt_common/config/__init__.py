"""Configuration helpers shared across print-table-lib."""

from pt_common.config.env import parse_bool_env, parse_int_env

__all__ = ["parse_bool_env", "parse_int_env"]
