"""File and stream utilities: spreadsheet parts, digests, decompression, encodings."""

from __future__ import annotations

import codecs
import gzip
import hashlib
import io
import logging
import re
import xml.etree.ElementTree as ET
import zipfile
import zlib
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from .config import get_settings
from .errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

SHARED_STRINGS_PART = "xl/sharedStrings.xml"
FIRST_SHEET_PART = "xl/worksheets/sheet1.xml"

_CELL_REF_RE = re.compile(r"^([A-Z]+)(\d+)$")


# ---------------------------------------------------------------------------
# Spreadsheet parts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PlanetInfo:
    name: str
    mean_radius: float

    def __str__(self) -> str:
        return f"{self.name} {self.mean_radius}"


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(elem: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in elem if _local(child.tag) == name]


def _shared_strings(root: ET.Element) -> list[str]:
    """One string per ``si`` entry; rich-text runs are joined."""
    strings = []
    for si in root:
        if _local(si.tag) != "si":
            continue
        strings.append("".join(t.text or "" for t in si.iter() if _local(t.tag) == "t"))
    return strings


def _cell_value(cell: ET.Element, shared: list[str]) -> str:
    kind = cell.get("t")
    if kind == "inlineStr":
        return "".join(t.text or "" for t in cell.iter() if _local(t.tag) == "t")
    v = next((c.text or "" for c in cell if _local(c.tag) == "v"), "")
    if kind == "s":
        return shared[int(v)]
    return v


def _read_column(sheet: ET.Element, column: str, shared: list[str]) -> list[str]:
    """Values of *column* below the header row, in row order."""
    values = []
    for cell in sheet.iter():
        if _local(cell.tag) != "c":
            continue
        m = _CELL_REF_RE.match(cell.get("r", ""))
        if m is None or m.group(1) != column or int(m.group(2)) == 1:
            continue
        values.append((int(m.group(2)), _cell_value(cell, shared)))
    return [value for _, value in sorted(values)]


def read_planet_info_from_xlsx(xlsx_file_name: str) -> list[PlanetInfo]:
    """Read planet names (column A) and mean radii (column B) from a workbook.

    The first row is a header. Only the first worksheet is read.
    """
    with zipfile.ZipFile(xlsx_file_name) as package:
        with package.open(SHARED_STRINGS_PART) as part:
            shared = _shared_strings(ET.parse(part).getroot())
        with package.open(FIRST_SHEET_PART) as part:
            sheet = ET.parse(part).getroot()

    names = _read_column(sheet, "A", shared)
    radius = _read_column(sheet, "B", shared)
    return [PlanetInfo(name=n, mean_radius=float(r)) for n, r in zip(names, radius)]


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------

def calculate_hash(stream: BinaryIO, hash_algorithm_name: str) -> str:
    """Uppercase hex digest of the remaining bytes of *stream*.

    Algorithm names are case-insensitive; ``"SHA-256"`` and ``"sha256"``
    are the same algorithm.
    """
    normalized = hash_algorithm_name.replace("-", "").lower()
    if normalized.startswith("shake"):
        # variable-length digests need an explicit size
        raise UnsupportedAlgorithmError(hash_algorithm_name)
    try:
        h = hashlib.new(normalized)
    except ValueError:
        raise UnsupportedAlgorithmError(hash_algorithm_name) from None

    chunk_size = get_settings().hash_chunk_size
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        h.update(chunk)
    logger.debug("hashed stream with %s", h.name)
    return h.hexdigest().upper()


# ---------------------------------------------------------------------------
# Decompression
# ---------------------------------------------------------------------------

class DecompressionMethod(Enum):
    NONE = "none"
    DEFLATE = "deflate"
    GZIP = "gzip"

    @classmethod
    def parse(cls, method: "DecompressionMethod | str") -> "DecompressionMethod":
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).lower())
        except ValueError:
            raise UnsupportedAlgorithmError(method) from None


class DeflateReader(io.RawIOBase):
    """Raw (headerless) deflate decoder over a binary file object.

    Closing the reader closes the wrapped file.
    """

    def __init__(self, fileobj: BinaryIO, chunk_size: int = io.DEFAULT_BUFFER_SIZE) -> None:
        self._fileobj = fileobj
        self._chunk_size = chunk_size
        self._decompressor = zlib.decompressobj(-zlib.MAX_WBITS)
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        while not self._pending:
            if self._decompressor.eof:
                return 0
            chunk = self._fileobj.read(self._chunk_size)
            if not chunk:
                raise EOFError("Compressed file ended before the end-of-stream marker was reached")
            self._pending = self._decompressor.decompress(chunk)
        n = min(len(b), len(self._pending))
        b[:n] = self._pending[:n]
        self._pending = self._pending[n:]
        return n

    def close(self) -> None:
        if not self.closed:
            self._fileobj.close()
        super().close()


def decompress_stream(file_name: str, method: DecompressionMethod | str) -> BinaryIO:
    """Open *file_name* and return a stream of its decompressed bytes.

    The caller owns the returned stream and must close it.
    """
    method = DecompressionMethod.parse(method)
    logger.debug("opening %s with %s decompression", file_name, method.value)

    if method is DecompressionMethod.NONE:
        return open(file_name, "rb")
    if method is DecompressionMethod.GZIP:
        return gzip.open(file_name, "rb")

    raw = open(file_name, "rb")
    try:
        return io.BufferedReader(DeflateReader(raw))
    except BaseException:
        raw.close()
        raise


# ---------------------------------------------------------------------------
# Encoded text
# ---------------------------------------------------------------------------

def read_encoded_text(file_name: str, encoding: str) -> str:
    """Read the whole file decoded with *encoding* (e.g. ``"koi8-r"``).

    Line endings are returned as stored.
    """
    check_text_encoding(encoding)
    with open(file_name, encoding=encoding, newline="") as fh:
        return fh.read()


def check_text_encoding(encoding: str) -> None:
    """Raise UnsupportedAlgorithmError unless *encoding* is a str <-> bytes codec.

    Codecs such as ``rot13``, ``hex`` or ``base64`` exist but cannot decode
    a file to text.
    """
    try:
        info = codecs.lookup(encoding)
    except LookupError:
        raise UnsupportedAlgorithmError(encoding) from None
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedAlgorithmError(encoding)
