"""
File I/O helpers.

Output files are written to a temporary file in the destination directory and
renamed into place, so a failed run never leaves a truncated backup behind.
"""
import os
import tempfile
from pathlib import Path

from daylio_pixels.core.exceptions import BackupIOError
from daylio_pixels.core.logging_config import log_info, log_warning


def read_input_bytes(path: Path) -> bytes:
    """
    Read a whole input file.

    Raises:
        BackupIOError: If the file is missing or unreadable
    """
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise BackupIOError("Input file not found", path) from e
    except OSError as e:
        raise BackupIOError(f"Failed to read input file: {e.strerror or e}", path) from e


def atomic_write_bytes(path: Path, data: bytes) -> int:
    """
    Write ``data`` to ``path`` atomically.

    Args:
        path: Destination file
        data: Content to write

    Returns:
        Number of bytes written

    Raises:
        BackupIOError: If the destination cannot be written
    """
    directory = path.parent if str(path.parent) else Path(".")
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=directory
        )
        with os.fdopen(fd, "wb") as tmp_file:
            tmp_file.write(data)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise BackupIOError(f"Failed to write output file: {e.strerror or e}", path) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError as cleanup_error:
                log_warning(
                    f"Failed to remove temporary file {tmp_name}: {cleanup_error}",
                    file_path=tmp_name,
                )

    log_info(f"Wrote {path}", file_path=str(path), size=len(data))
    return len(data)


def atomic_write_text(path: Path, text: str) -> int:
    """Encode ``text`` as UTF-8 and write it atomically."""
    return atomic_write_bytes(path, text.encode("utf-8"))
