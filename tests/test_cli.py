"""Tests for the rtasks command line."""

import gzip
import hashlib
import io

import pytest

from rtasks.cli import build_parser, main


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_hash(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    buf = io.StringIO()
    assert main(["hash", str(path), "-a", "md5"], dest=buf) == 0
    assert buf.getvalue().strip() == hashlib.md5(b"abc").hexdigest().upper()


def test_hash_default_sha256(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    buf = io.StringIO()
    main(["hash", str(path)], dest=buf)
    assert buf.getvalue().strip() == hashlib.sha256(b"abc").hexdigest().upper()


def test_hash_unknown_algorithm(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    assert main(["hash", str(path), "-a", "nope"], dest=io.StringIO()) == 1
    assert "Error:" in capsys.readouterr().err


def test_decompress_gzip(tmp_path):
    path = tmp_path / "data.gz"
    path.write_bytes(gzip.compress("héllo".encode("utf-8")))
    buf = io.StringIO()
    assert main(["decompress", str(path), "-m", "gzip"], dest=buf) == 0
    assert buf.getvalue() == "héllo"


def test_decompress_rejects_unknown_method(tmp_path):
    with pytest.raises(SystemExit):
        main(["decompress", str(tmp_path / "x"), "-m", "zstd"])


def test_read_with_encoding(tmp_path):
    path = tmp_path / "legacy.txt"
    path.write_bytes("Ёж".encode("cp866"))
    buf = io.StringIO()
    assert main(["read", str(path), "-e", "cp866"], dest=buf) == 0
    assert buf.getvalue() == "Ёж"


def test_read_missing_file(tmp_path, capsys):
    assert main(["read", str(tmp_path / "missing.txt")], dest=io.StringIO()) == 1
    assert "Error:" in capsys.readouterr().err


def test_obsolete_module():
    buf = io.StringIO()
    assert main(["obsolete", "rtasks.typedef"], dest=buf) == 0
    assert buf.getvalue() == ""


def test_obsolete_unknown_module(capsys):
    assert main(["obsolete", "no_such_module_for_rtasks"], dest=io.StringIO()) == 1
    assert "no_such_module_for_rtasks" in capsys.readouterr().err


def test_planets(tmp_path):
    import zipfile

    ns = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
    path = tmp_path / "Planets.xlsx"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("xl/sharedStrings.xml", f'<sst xmlns="{ns}"><si><t>Name</t></si><si><t>Mars</t></si></sst>')
        zf.writestr(
            "xl/worksheets/sheet1.xml",
            f'<worksheet xmlns="{ns}"><sheetData>'
            '<row r="1"><c r="A1" t="s"><v>0</v></c><c r="B1" t="inlineStr"><is><t>Radius</t></is></c></row>'
            '<row r="2"><c r="A2" t="s"><v>1</v></c><c r="B2"><v>3389.5</v></c></row>'
            "</sheetData></worksheet>",
        )
    buf = io.StringIO()
    assert main(["-v", "planets", str(path)], dest=buf) == 0
    assert buf.getvalue() == "Mars  3389.50\n"


def test_decompress_unknown_encoding(tmp_path, capsys):
    path = tmp_path / "data.gz"
    path.write_bytes(gzip.compress(b"hello"))
    assert main(["decompress", str(path), "-m", "gzip", "-e", "no-such-codec"], dest=io.StringIO()) == 1
    assert "Error:" in capsys.readouterr().err


def test_read_non_text_codec(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_bytes(b"hello")
    assert main(["read", str(path), "-e", "rot13"], dest=io.StringIO()) == 1
    assert "Error:" in capsys.readouterr().err


def test_decompress_truncated_deflate(tmp_path, capsys):
    import zlib

    c = zlib.compressobj(9, zlib.DEFLATED, -zlib.MAX_WBITS)
    data = c.compress(b"hello world " * 200) + c.flush()
    path = tmp_path / "short.deflate"
    path.write_bytes(data[: len(data) // 2])
    assert main(["decompress", str(path), "-m", "deflate"], dest=io.StringIO()) == 1
    assert "Error:" in capsys.readouterr().err
