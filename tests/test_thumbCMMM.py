"""Tests for reporting and extracting a CMMM database."""

from io import BytesIO

import pytest
from PIL import Image

from thumbwalk import error, thumbCMMM

from cmmm_builder import JPEG_DATA, PNG_DATA, build_database, build_entry, build_header, utf16


def png_bytes(size):
    out = BytesIO()
    Image.new("RGB", size).save(out, "PNG")
    return out.getvalue()


class TestReport:
    """Terminal output."""

    def test_header_and_entries(self, args, capsys):
        data = build_database(build_entry(JPEG_DATA, name=utf16("a.jp"), hash_value=0xAB))
        tdb_walker = thumbCMMM.process("thumbcache_1280.db", data)
        out = capsys.readouterr().out

        assert tdb_walker.isDone()
        assert "Type: 6 (thumbcache_1280.db)" in out
        assert "Format: 32 (Windows 10)" in out
        assert "Cache Entry 1" in out
        assert "ID: a.jp" in out
        assert "Unextracted:    1 thumbnails" in out

    def test_verbose_fields(self, args, capsys):
        args.verbose = 1
        args.checksum = "warn"
        data = build_database(build_entry(JPEG_DATA, hash_value=0xAB, width=96, height=48, checksums=True))
        thumbCMMM.process("db", data)
        out = capsys.readouterr().out

        assert "Hash: 00000000000000ab" in out
        assert "Extension: jpg" in out
        assert "Image  Width: 96" in out
        assert "Checksums: Valid" in out
        assert "1st Available: 24" in out

    def test_quiet(self, args, capsys):
        args.verbose = -1
        thumbCMMM.process("db", build_database(build_entry(b"????")))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_header_only(self, args, capsys):
        thumbCMMM.process("db", build_header())
        out = capsys.readouterr().out
        assert " Header" in out
        assert "No Stats!" in out

    def test_unidentified_warning(self, args, capsys):
        thumbCMMM.process("db", build_database(build_entry(b"\x01\x02\x03\x04")))
        assert "Cannot determine file type of entry 1: 01 02 03 04" in capsys.readouterr().err

    def test_unknown_cache_type_warning(self, args, capsys):
        thumbCMMM.process("db", build_database(build_entry(JPEG_DATA), cache_type=99))
        captured = capsys.readouterr()
        assert "UnknownCacheType" in captured.err
        assert "Unknown Type" in captured.out

    def test_checksum_warning(self, args, capsys):
        args.checksum = "warn"
        thumbCMMM.process("db", build_database(build_entry(JPEG_DATA, data_checksum=3)))
        assert "ChecksumMismatch at offset 24" in capsys.readouterr().err

    def test_imgcheck(self, args, capsys):
        args.imgcheck = True
        data = build_database(
            build_entry(png_bytes((4, 4)), width=4, height=4, hash_value=1),
            build_entry(png_bytes((4, 4)), width=8, height=8, hash_value=2),
        )
        thumbCMMM.process("db", data)
        err = capsys.readouterr().err
        assert "Entry 1 image" not in err
        assert "Entry 2 image is 4x4, declared 8x8" in err

    def test_failure_returns_walker(self, args, capsys):
        data = build_database(build_entry(JPEG_DATA), build_entry(JPEG_DATA, magic=b"XXXX"))
        tdb_walker = thumbCMMM.process("db", data)
        assert tdb_walker.isFailed()
        assert isinstance(tdb_walker.error, error.BadMagicError)
        assert "Cache Entry 1" in capsys.readouterr().out


class TestExtract:
    """Writing payloads to an output directory."""

    def test_writes_by_hash(self, args, tmp_path):
        args.outdir = str(tmp_path)
        data = build_database(
            build_entry(JPEG_DATA, hash_value=0x10),
            build_entry(PNG_DATA, hash_value=0x20),
            build_entry(b"\x00\x00\x00\x00", hash_value=0x30),
            build_entry(b"", entry_size=60),
        )
        thumbCMMM.process("db", data)

        assert (tmp_path / "0000000000000010.jpg").read_bytes() == JPEG_DATA
        assert (tmp_path / "0000000000000020.png").read_bytes() == PNG_DATA
        assert (tmp_path / "0000000000000030.img").read_bytes() == b"\x00\x00\x00\x00"
        assert len(list(tmp_path.iterdir())) == 3

    def test_duplicate_hash(self, args, tmp_path):
        args.outdir = str(tmp_path)
        data = build_database(build_entry(JPEG_DATA, hash_value=7), build_entry(JPEG_DATA, hash_value=7))
        thumbCMMM.process("db", data)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["0000000000000007.jpg", "0000000000000007_1.jpg"]

    def test_threaded_writes(self, args, tmp_path, capsys):
        args.outdir = str(tmp_path)
        args.jobs = 4
        entries = [build_entry(JPEG_DATA + bytes([i]), hash_value=i) for i in range(1, 21)]
        thumbCMMM.process("db", build_database(*entries))

        assert len(list(tmp_path.iterdir())) == 20
        assert (tmp_path / "0000000000000005.jpg").read_bytes() == JPEG_DATA + b"\x05"
        assert "Extracted:   20 thumbnails to " + str(tmp_path) in capsys.readouterr().out

    def test_partial_extraction_before_error(self, args, tmp_path):
        args.outdir = str(tmp_path)
        data = build_database(build_entry(JPEG_DATA, hash_value=1), build_entry(JPEG_DATA, data_size=999))
        tdb_walker = thumbCMMM.process("db", data)

        assert tdb_walker.isFailed()
        assert (tmp_path / "0000000000000001.jpg").exists()

    def test_unwritable(self, args, tmp_path):
        args.outdir = str(tmp_path / "missing")
        with pytest.raises(error.OutputError):
            thumbCMMM.process("db", build_database(build_entry(JPEG_DATA)))
