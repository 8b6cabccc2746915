"""Utility functions for common operations."""

from .ir_io import (
    deserialize,
    serialize,
    load_diagram,
    load_diagram_from_json,
    save_diagram_to_json,
    export_markdown,
    export_mermaid,
    read_xlsx_bytes,
    write_xlsx_bytes,
)

__all__ = [
    "deserialize",
    "serialize",
    "load_diagram",
    "load_diagram_from_json",
    "save_diagram_to_json",
    "export_markdown",
    "export_mermaid",
    "read_xlsx_bytes",
    "write_xlsx_bytes",
]
