"""
Daylio archive codec.

A ``.daylio`` file is a ZIP archive with a single ``backup.daylio`` member.
That member holds the backup JSON as base64 text, wrapped at 76 characters
per line the way Daylio's own exporter writes it.
"""
import base64
import binascii
import re
import zipfile

from daylio_pixels.core.config import BASE64_LINE_WIDTH, DAYLIO_ARCHIVE_ENTRY
from daylio_pixels.core.exceptions import ArchiveFormatError, EncodingError
from daylio_pixels.core.logging_config import log_debug
from daylio_pixels.utils.import_export import ZipHandler


class DaylioArchiveCodec:
    """Converts between ``.daylio`` archive bytes and backup JSON text."""

    def __init__(
        self,
        entry_name: str = DAYLIO_ARCHIVE_ENTRY,
        line_width: int = BASE64_LINE_WIDTH,
    ):
        self.entry_name = entry_name
        self.line_width = line_width

    def decode(self, archive_bytes: bytes) -> str:
        """
        Extract the backup JSON text from a Daylio archive.

        Args:
            archive_bytes: Raw content of a ``.daylio`` file

        Returns:
            Backup JSON as text

        Raises:
            ArchiveFormatError: If the data is not a ZIP or lacks the backup member
            EncodingError: If the member is not valid base64 or the payload not UTF-8
        """
        try:
            payload = ZipHandler.read_member(archive_bytes, self.entry_name)
        except zipfile.BadZipFile as e:
            raise ArchiveFormatError(f"Not a valid Daylio archive: {e}") from e
        except KeyError as e:
            raise ArchiveFormatError(
                f"Daylio archive has no '{self.entry_name}' entry"
            ) from e

        try:
            encoded = payload.decode("ascii")
        except UnicodeDecodeError as e:
            raise EncodingError(
                f"'{self.entry_name}' does not contain base64 text"
            ) from e

        # Line breaks are layout only.
        compact = "".join(encoded.split())
        try:
            raw = base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as e:
            raise EncodingError(f"Invalid base64 payload: {e}") from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"Backup payload is not UTF-8: {e}") from e

        log_debug("Decoded Daylio archive", payload_chars=len(text))
        return text

    def encode(self, json_text: str) -> bytes:
        """
        Build a Daylio archive around backup JSON text.

        The output is deterministic: the same text always yields the same bytes.
        """
        encoded = base64.b64encode(json_text.encode("utf-8")).decode("ascii")
        wrapped = self.wrap_base64(encoded, self.line_width)
        return ZipHandler.build_single_member_archive(
            self.entry_name, wrapped.encode("ascii")
        )

    @staticmethod
    def wrap_base64(encoded: str, width: int = BASE64_LINE_WIDTH) -> str:
        """
        Insert a newline after every full ``width`` characters.

        A final short line is left without a newline; if the text length is a
        multiple of ``width`` the result ends with a newline.
        """
        if width <= 0:
            raise ValueError("Line width must be a positive integer")
        return re.sub(f".{{{width}}}", lambda match: match.group(0) + "\n", encoded)
