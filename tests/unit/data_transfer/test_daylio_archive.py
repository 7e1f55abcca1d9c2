"""
Unit tests for the Daylio archive codec.
"""
import base64
import io
import json
import zipfile

import pytest

from daylio_pixels.core.exceptions import ArchiveFormatError, EncodingError
from daylio_pixels.data_transfer.daylio import DaylioArchiveCodec


def _zip_with(name: str, content: bytes) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr(name, content)
    return buffer.getvalue()


class TestWrapBase64:
    """Test the fixed-width base64 layout."""

    def test_every_full_line_has_76_characters(self):
        encoded = "A" * 200
        wrapped = DaylioArchiveCodec.wrap_base64(encoded)
        lines = wrapped.split("\n")

        assert [len(line) for line in lines] == [76, 76, 48]
        assert wrapped.replace("\n", "") == encoded

    def test_exact_multiple_ends_with_newline(self):
        wrapped = DaylioArchiveCodec.wrap_base64("B" * 152)
        assert wrapped == "B" * 76 + "\n" + "B" * 76 + "\n"

    def test_short_payload_is_not_wrapped(self):
        assert DaylioArchiveCodec.wrap_base64("abc") == "abc"

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError):
            DaylioArchiveCodec.wrap_base64("abc", width=0)


class TestEncode:
    """Test building .daylio archives."""

    def test_archive_has_single_wrapped_member(self):
        payload = json.dumps({"dayEntries": [], "note": "x" * 300})
        archive = DaylioArchiveCodec().encode(payload)

        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            assert zf.namelist() == ["backup.daylio"]
            content = zf.read("backup.daylio").decode("ascii")

        lines = content.split("\n")
        assert all(len(line) == 76 for line in lines[:-1])
        assert len(lines[-1]) <= 76
        assert base64.b64decode("".join(lines)).decode("utf-8") == payload

    def test_member_is_stored_uncompressed(self):
        archive = DaylioArchiveCodec().encode('{"dayEntries":[]}')

        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            info = zf.getinfo("backup.daylio")

        assert info.compress_type == zipfile.ZIP_STORED
        assert info.date_time == (1980, 1, 1, 0, 0, 0)
        assert info.create_system == 3
        assert (info.external_attr >> 16) & 0o777 == 0o644

    def test_encoding_is_reproducible(self):
        payload = '{"dayEntries":[{"mood":1}]}'
        codec = DaylioArchiveCodec()
        assert codec.encode(payload) == codec.encode(payload)

    def test_decode_restores_unicode_text(self):
        payload = '{"note":"Café \U0001F60C ünïcode"}'
        codec = DaylioArchiveCodec()
        assert codec.decode(codec.encode(payload)) == payload


class TestDecode:
    """Test reading .daylio archives."""

    def test_accepts_crlf_wrapped_payload(self):
        payload = json.dumps({"dayEntries": [], "padding": "y" * 120})
        encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
        wrapped = "\r\n".join(encoded[i:i + 76] for i in range(0, len(encoded), 76))

        archive = _zip_with("backup.daylio", wrapped.encode("ascii"))
        assert DaylioArchiveCodec().decode(archive) == payload

    def test_not_a_zip_raises_archive_format_error(self):
        with pytest.raises(ArchiveFormatError):
            DaylioArchiveCodec().decode(b"definitely not a zip file")

    def test_missing_member_raises_archive_format_error(self):
        archive = _zip_with("other.txt", b"e30=")
        with pytest.raises(ArchiveFormatError) as exc_info:
            DaylioArchiveCodec().decode(archive)
        assert "backup.daylio" in str(exc_info.value)

    def test_invalid_base64_raises_encoding_error(self):
        archive = _zip_with("backup.daylio", b"@@not*base64@@")
        with pytest.raises(EncodingError):
            DaylioArchiveCodec().decode(archive)

    def test_non_utf8_payload_raises_encoding_error(self):
        archive = _zip_with("backup.daylio", base64.b64encode(b"\xff\xfe\xfa"))
        with pytest.raises(EncodingError):
            DaylioArchiveCodec().decode(archive)

    def test_custom_entry_name(self):
        codec = DaylioArchiveCodec(entry_name="data.b64")
        archive = codec.encode("{}")
        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            assert zf.namelist() == ["data.b64"]
        assert codec.decode(archive) == "{}"
