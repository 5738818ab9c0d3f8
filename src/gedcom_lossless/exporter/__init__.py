"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    export_result_json,
    result_to_dict,
    serialize_result_to_json_string,
    to_json_compatible,
)

__all__ = [
    "export_result_json",
    "result_to_dict",
    "serialize_result_to_json_string",
    "to_json_compatible",
]
