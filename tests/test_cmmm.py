"""Tests for CMMM header and entry decoding."""

import random

import pytest

from thumbwalk import cmmm, error
from thumbwalk.checksum import crc64

from cmmm_builder import JPEG_DATA, build_entry, build_header, utf16


class TestDecodeHeader:
    """Tests for decodeHeader()."""

    def test_fields(self):
        data = build_header(version=0x20, cache_type=6, unknown=7,
                            first_entry_offset=24, available_entry_offset=24)
        header = cmmm.decodeHeader(data)

        assert header.magic == b"CMMM"
        assert header.version == 0x20
        assert header.cache_type == 6
        assert header.unknown == 7
        assert header.first_entry_offset == 24
        assert header.available_entry_offset == 24
        assert header.format_name == "Windows 10"
        assert header.cache_type_name == "1280"
        assert cmmm.getCacheFileName(header) == "thumbcache_1280.db"

    def test_unknown_format_is_informational(self):
        header = cmmm.decodeHeader(build_header(version=0x99))
        assert header.format_name is None

    def test_too_short(self):
        with pytest.raises(error.TooShortError) as excinfo:
            cmmm.decodeHeader(build_header()[:23])
        assert excinfo.value.iOffset == 0

    def test_empty(self):
        with pytest.raises(error.TooShortError):
            cmmm.decodeHeader(b"")

    def test_bad_magic(self):
        with pytest.raises(error.BadMagicError):
            cmmm.decodeHeader(build_header(magic=b"IMMM"))

    def test_first_offset_inside_header(self):
        with pytest.raises(error.OffsetOutOfRangeError):
            cmmm.decodeHeader(build_header(first_entry_offset=23))

    def test_first_offset_past_end(self):
        data = build_header(first_entry_offset=100) + b"\x00" * 10
        with pytest.raises(error.OffsetOutOfRangeError):
            cmmm.decodeHeader(data)

    def test_first_offset_at_end(self):
        header = cmmm.decodeHeader(build_header(first_entry_offset=24))
        assert header.first_entry_offset == 24

    def test_unknown_cache_type_carries_header(self):
        with pytest.raises(error.UnknownCacheTypeError) as excinfo:
            cmmm.decodeHeader(build_header(cache_type=0xE))
        header = excinfo.value.header
        assert header.cache_type == 0xE
        assert header.cache_type_name is None
        assert header.first_entry_offset == 24
        assert cmmm.getCacheFileName(header) == "Unknown Type"

    def test_fatal_checks_before_cache_type(self):
        with pytest.raises(error.OffsetOutOfRangeError):
            cmmm.decodeHeader(build_header(cache_type=0xE, first_entry_offset=4))

    def test_all_cache_types(self):
        names = [cmmm.decodeHeader(build_header(cache_type=i)).cache_type_name for i in range(14)]
        assert names[0] == "16"
        assert names[9] == "sr"
        assert names[13] == "custom_stream"


class TestDecodeEntry:
    """Tests for decodeEntry()."""

    def test_fields(self):
        data = build_header() + build_entry(JPEG_DATA, name=utf16("a.jp"), entry_size=80,
                                            hash_value=0xDEADBEEFCAFEF00D, width=96, height=64,
                                            unknown=3, data_checksum=11, header_checksum=12)
        entry = cmmm.decodeEntry(data, 24)

        assert entry.magic == b"CMMM"
        assert entry.entry_size == 80
        assert entry.hash == 0xDEADBEEFCAFEF00D
        assert entry.filename_length == 8
        assert entry.padding_size == 0
        assert entry.data_size == 4
        assert entry.width == 96
        assert entry.height == 64
        assert entry.unknown == 3
        assert entry.data_checksum == 11
        assert entry.header_checksum == 12

    def test_random_fields(self):
        rand = random.Random(1234)
        for _ in range(25):
            fields = dict(
                entry_size=rand.randint(1, 0xFFFFFFFF),
                hash_value=rand.randint(0, 0xFFFFFFFFFFFFFFFF),
                filename_length=rand.randint(0, 0x7FFFFFFF) * 2,
                padding_size=rand.randint(0, 0xFFFFFFFF),
                data_size=rand.randint(0, 0xFFFFFFFF),
                width=rand.randint(0, 0xFFFFFFFF),
                height=rand.randint(0, 0xFFFFFFFF),
                unknown=rand.randint(0, 0xFFFFFFFF),
                data_checksum=rand.randint(0, 0xFFFFFFFFFFFFFFFF),
                header_checksum=rand.randint(0, 0xFFFFFFFFFFFFFFFF),
            )
            offset = rand.randint(0, 40)
            entry = cmmm.decodeEntry(b"\x00" * offset + build_entry(**fields), offset)
            assert entry.hash == fields["hash_value"]
            assert entry.entry_size == fields["entry_size"]
            assert entry.filename_length == fields["filename_length"]
            assert entry.padding_size == fields["padding_size"]
            assert entry.data_size == fields["data_size"]
            assert (entry.width, entry.height, entry.unknown) == \
                (fields["width"], fields["height"], fields["unknown"])
            assert (entry.data_checksum, entry.header_checksum) == \
                (fields["data_checksum"], fields["header_checksum"])

    def test_too_short(self):
        data = build_header() + build_entry(JPEG_DATA)[:55]
        with pytest.raises(error.TooShortError) as excinfo:
            cmmm.decodeEntry(data, 24)
        assert excinfo.value.iOffset == 24

    def test_offset_past_end(self):
        with pytest.raises(error.TooShortError):
            cmmm.decodeEntry(build_header(), 1000)

    def test_huge_offset(self):
        with pytest.raises(error.TooShortError):
            cmmm.decodeEntry(build_header(), 0xFFFFFFFFFFFFFFF0)

    def test_bad_magic(self):
        data = build_header() + build_entry(JPEG_DATA, magic=b"CMMX")
        with pytest.raises(error.BadMagicError) as excinfo:
            cmmm.decodeEntry(data, 24)
        assert excinfo.value.iOffset == 24
        assert excinfo.value.strKind == "BadMagic"

    def test_zero_size(self):
        data = build_header() + build_entry(JPEG_DATA, entry_size=0)
        with pytest.raises(error.ZeroSizedEntryError):
            cmmm.decodeEntry(data, 24)

    def test_odd_filename(self):
        data = build_header() + build_entry(JPEG_DATA, name=b"abc")
        with pytest.raises(error.MalformedFilenameError):
            cmmm.decodeEntry(data, 24)

    def test_no_checksum_check(self):
        data = build_header() + build_entry(JPEG_DATA, data_checksum=1, header_checksum=2)
        assert cmmm.decodeEntry(data, 24).data_checksum == 1


class TestVerifyChecksums:
    """Tests for verifyChecksums()."""

    def test_valid(self):
        data = build_header() + build_entry(JPEG_DATA, checksums=True)
        entry = cmmm.decodeEntry(data, 24)
        assert entry.data_checksum == crc64(JPEG_DATA)
        cmmm.verifyChecksums(data, 24, entry, JPEG_DATA)

    def test_unrecorded(self):
        data = build_header() + build_entry(JPEG_DATA)
        entry = cmmm.decodeEntry(data, 24)
        cmmm.verifyChecksums(data, 24, entry, JPEG_DATA)

    def test_data_mismatch(self):
        data = build_header() + build_entry(JPEG_DATA, data_checksum=5)
        entry = cmmm.decodeEntry(data, 24)
        with pytest.raises(error.ChecksumMismatchError, match="Data checksum"):
            cmmm.verifyChecksums(data, 24, entry, JPEG_DATA)

    def test_header_mismatch(self):
        data = build_header() + build_entry(JPEG_DATA, header_checksum=5)
        entry = cmmm.decodeEntry(data, 24)
        with pytest.raises(error.ChecksumMismatchError, match="Header checksum") as excinfo:
            cmmm.verifyChecksums(data, 24, entry, JPEG_DATA)
        assert excinfo.value.iOffset == 24
