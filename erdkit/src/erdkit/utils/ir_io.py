"""Utilities for loading and saving diagrams from/to JSON and export files."""

from pathlib import Path
from typing import Optional
from pydantic import ValidationError

from erdkit.config.logging import get_logger
from erdkit.config.settings import get_settings
from erdkit.export import render_markdown, render_mermaid
from erdkit.ir.errors import (
    DeserializationError,
    DiagramFileError,
    StructureTooComplexError,
)
from erdkit.ir.normalize import normalize
from erdkit.ir.schema import Diagram
from erdkit.ir.validators import validate_basic_diagram

logger = get_logger(__name__)


def _is_recursion_failure(error: ValidationError) -> bool:
    return any("recursion limit" in err.get("msg", "") for err in error.errors())


def deserialize(text: str) -> Diagram:
    """
    Parse diagram JSON into a Diagram.

    The result is not normalized; use ``load_diagram`` for the full pipeline.

    Raises:
        StructureTooComplexError: JSON nesting exceeds the parser's depth limit
        DeserializationError: Malformed JSON or schema mismatch
    """
    try:
        return Diagram.model_validate_json(text)
    except RecursionError as e:
        raise StructureTooComplexError("JSON structure is too complex") from e
    except ValidationError as e:
        if _is_recursion_failure(e):
            raise StructureTooComplexError("JSON structure is too complex") from e
        raise DeserializationError(f"Could not parse diagram: {e}") from e


def serialize(diagram: Diagram) -> str:
    """Serialize a diagram as pretty-printed JSON."""
    return diagram.model_dump_json(indent=2)


def load_diagram(text: str) -> Diagram:
    """
    Deserialize, normalize and sanity-check diagram JSON.

    Raises:
        DeserializationError: See ``deserialize``
        DiagramLimitError: Too many entities or relations
    """
    diagram = normalize(deserialize(text))
    validate_basic_diagram(diagram)
    return diagram


def _check_file(path: Path, extension: str, max_bytes: Optional[int]) -> None:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if max_bytes is None:
        max_bytes = get_settings().max_file_size_mb * 1024 * 1024
    try:
        size = path.stat().st_size
    except OSError as e:
        raise DiagramFileError(f"Could not read file {path}: {e}") from e
    if size > max_bytes:
        raise DiagramFileError(
            f"File is too large: {path} ({size} bytes, maximum {max_bytes} bytes)"
        )

    if not path.suffix:
        raise DiagramFileError(
            f"File extension required: {path}. Please select a .{extension} file."
        )
    if path.suffix.lower() != f".{extension}":
        raise DiagramFileError(f"Only .{extension} files are supported: {path}")


def load_diagram_from_json(path: Path, max_bytes: Optional[int] = None) -> Diagram:
    """
    Load a diagram from a JSON file.

    Args:
        path: Path to the .json file
        max_bytes: Size ceiling (defaults to Settings.max_file_size_mb)

    Returns:
        Normalized Diagram

    Raises:
        FileNotFoundError: If the file doesn't exist
        DiagramFileError: If the file is too large, not .json, empty,
            not valid UTF-8 or unreadable
        DeserializationError: If the JSON is invalid
        DiagramLimitError: If the diagram is too large
    """
    path = Path(path)
    _check_file(path, "json", max_bytes)

    try:
        content = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise DiagramFileError(f"Could not read file {path}: {e}") from e
    if not content.strip():
        raise DiagramFileError(f"File is empty: {path}")

    try:
        diagram = load_diagram(content)
    except DeserializationError as e:
        logger.error(f"Failed to load diagram from {path}: {e}")
        raise

    logger.info(
        f"Loaded diagram from {path}: {len(diagram.entities)} entities, "
        f"{len(diagram.relations)} relations"
    )
    return diagram


def _write(path: Path, content) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise DiagramFileError(f"Could not write file {path}: {e}") from e
    return path


def save_diagram_to_json(diagram: Diagram, path: Path) -> Path:
    """
    Save a diagram to a JSON file.

    Note:
        Creates parent directories if they don't exist.

    Raises:
        DiagramFileError: If the file cannot be written
    """
    path = _write(path, serialize(diagram))
    logger.info(f"Saved diagram to {path}")
    return path


def export_markdown(diagram: Diagram, path: Path) -> Path:
    """Write the Markdown rendering of a diagram to ``path``."""
    path = _write(path, render_markdown(diagram))
    logger.info(f"Exported Markdown to {path}")
    return path


def export_mermaid(diagram: Diagram, path: Path) -> Path:
    """Write the Mermaid rendering of a diagram to ``path``."""
    path = _write(path, render_mermaid(diagram))
    logger.info(f"Exported Mermaid to {path}")
    return path


def read_xlsx_bytes(path: Path, max_bytes: Optional[int] = None) -> bytes:
    """
    Read a spreadsheet file as opaque bytes.

    The payload is not decoded here; only size, extension and emptiness
    are checked.
    """
    path = Path(path)
    _check_file(path, "xlsx", max_bytes)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise DiagramFileError(f"Could not read file {path}: {e}") from e
    if not data:
        raise DiagramFileError(f"File is empty: {path}")
    logger.info(f"Read {len(data)} bytes from {path}")
    return data


def write_xlsx_bytes(data: bytes, path: Path) -> Path:
    """Write spreadsheet bytes unchanged."""
    path = _write(path, bytes(data))
    logger.info(f"Wrote {len(data)} bytes to {path}")
    return path
