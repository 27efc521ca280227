"""Write converted screenplays to disk."""

from __future__ import annotations

from pathlib import Path

from scripter.config import get_logger
from scripter.exceptions import FileSystemError

logger = get_logger(__name__)

FOUNTAIN_SUFFIX = ".fountain"


def write_fountain_file(output_path: Path | str, content: str) -> Path:
    """Write Fountain text as UTF-8, creating parent directories.

    Args:
        output_path: Destination file
        content: Fountain text

    Returns:
        The path that was written

    Raises:
        FileSystemError: If the directory or file cannot be written
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(
            message=f"Failed to write Fountain file: {path}",
            hint="Check that the output location is writable",
            details={"path": str(path), "error": str(e)},
        ) from e

    logger.debug("Wrote Fountain file", path=str(path), chars=len(content))
    return path


def generate_output_path(
    input_path: Path | str, output_dir: Path | str | None = None
) -> Path:
    """Derive the ``.fountain`` output path for an input PDF.

    Without an output directory the file name is relative to the current
    working directory.
    """
    output_name = Path(input_path).with_suffix(FOUNTAIN_SUFFIX).name
    if output_dir:
        return Path(output_dir) / output_name
    return Path(output_name)
