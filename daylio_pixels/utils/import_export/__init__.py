"""
Import/Export utility modules.
"""
from .file_utils import atomic_write_bytes, atomic_write_text, read_input_bytes
from .json_utils import dump_compact, dump_pretty, parse_json_text
from .validators import summarize_validation_error
from .zip_handler import ZipHandler

__all__ = [
    "atomic_write_bytes",
    "atomic_write_text",
    "dump_compact",
    "dump_pretty",
    "parse_json_text",
    "read_input_bytes",
    "summarize_validation_error",
    "ZipHandler",
]
