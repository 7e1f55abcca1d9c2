"""
ZIP archive helpers for backup containers.
"""
import io
import zipfile

from daylio_pixels.core.logging_config import log_debug

# Fixed member timestamp so the same payload always produces the same archive.
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
# 0o644 regular file, stored in the high word of external_attr for UNIX hosts.
UNIX_FILE_ATTR = (0o100644 & 0xFFFF) << 16
UNIX_CREATE_SYSTEM = 3


class ZipHandler:
    """Reads and writes in-memory ZIP archives."""

    @staticmethod
    def read_member(archive_bytes: bytes, member_name: str) -> bytes:
        """
        Read a single member from an in-memory ZIP archive.

        Args:
            archive_bytes: Raw ZIP data
            member_name: Name of the member to read

        Returns:
            Member content

        Raises:
            zipfile.BadZipFile: If the data is not a ZIP archive
            KeyError: If the member does not exist
        """
        with zipfile.ZipFile(io.BytesIO(archive_bytes), "r") as zf:
            names = zf.namelist()
            log_debug("Opened archive", members=len(names))
            return zf.read(member_name)

    @staticmethod
    def build_single_member_archive(member_name: str, content: bytes) -> bytes:
        """
        Build a ZIP archive holding exactly one member.

        The archive is generated into a seekable buffer, so sizes and CRC are
        written into the local header and no data descriptor is emitted. The
        member timestamp and permissions are fixed, which makes the output
        byte-for-byte reproducible.
        """
        info = zipfile.ZipInfo(member_name, date_time=ZIP_EPOCH)
        info.compress_type = zipfile.ZIP_STORED
        info.create_system = UNIX_CREATE_SYSTEM
        info.external_attr = UNIX_FILE_ATTR

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as zf:
            zf.writestr(info, content)
        return buffer.getvalue()
