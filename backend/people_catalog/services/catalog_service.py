"""Directory-backed people catalog.

Every call rescans the image directory; nothing is cached between requests,
so ids are only meaningful within the snapshot that produced them.
"""
import logging
import os
import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union
from urllib.parse import quote

from ..schemas import PersonRecord

logger = logging.getLogger(__name__)

# Supported image formats
IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif")

_EXT_PATTERN = "|".join(IMAGE_EXTENSIONS)
_IMAGE_SUFFIX_RE = re.compile(rf"\.(?:{_EXT_PATTERN})\Z", re.IGNORECASE)
_NAMED_FILE_RE = re.compile(rf"([0-9]+)\s*-\s*(.+)\.(?:{_EXT_PATTERN})", re.IGNORECASE)
_SIGNED_RE = re.compile(r"\s*([+-]?)(.*)", re.DOTALL)
_DECIMAL_DIGITS_RE = re.compile(r"[0-9]*")
_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]*")

# Characters left unescaped by JavaScript's encodeURIComponent, on top of
# the ones urllib.parse.quote never escapes
_URI_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class NamedFilename:
    """Filename following the ``<digits> - <label>.<ext>`` convention."""
    external_id: str
    name: str


@dataclass(frozen=True)
class PlainFilename:
    """Any other image filename; the name is the filename minus extension."""
    name: str


ParsedFilename = Union[NamedFilename, PlainFilename]


def is_image_file(filename: str) -> bool:
    """Check if file has a supported image extension."""
    return _IMAGE_SUFFIX_RE.search(filename) is not None


def strip_image_extension(filename: str) -> str:
    return _IMAGE_SUFFIX_RE.sub("", filename)


def parse_filename(filename: str) -> ParsedFilename:
    """Split an image filename into its external id and display name."""
    match = _NAMED_FILE_RE.fullmatch(filename)
    if match:
        return NamedFilename(external_id=match.group(1), name=match.group(2).strip())
    return PlainFilename(name=strip_image_extension(filename))


def image_url(filename: str) -> str:
    """URL path of a file served by the image route."""
    return f"/images/{quote(filename, safe=_URI_COMPONENT_SAFE)}"


def _char_class(ch: str) -> int:
    # punctuation and symbols < digits < letters
    if ch.isalpha():
        return 2
    if ch.isdigit():
        return 1
    return 0


def collation_key(name: str) -> Tuple[tuple, tuple, tuple]:
    """
    Sort key approximating locale-aware string comparison.

    Compared level by level: base characters (accents and case ignored,
    symbols before digits before letters), then accent marks per base
    character (unaccented first), then case (lowercase first). So
    ``"alice" < "Alice" < "bob" < "Bob"`` and ``"Eli" < "éli"``.
    """
    bases: List[Tuple[int, str]] = []
    accents: List[str] = []
    cases: List[int] = []
    for ch in unicodedata.normalize("NFKD", name):
        if unicodedata.combining(ch) and accents:
            accents[-1] += ch
            continue
        folded = ch.casefold()
        bases.append((_char_class(folded[:1]), folded))
        accents.append("")
        cases.append(1 if ch.isupper() else 0)
    return tuple(bases), tuple(accents), tuple(cases)


def display_filename(filename: str) -> str:
    """
    Undecodable bytes in a listed filename (surrogate escapes from
    os.listdir) become U+FFFD.
    """
    return filename.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def to_person_record(person_id: int, filename: str) -> PersonRecord:
    parsed = parse_filename(filename)
    external_id = parsed.external_id if isinstance(parsed, NamedFilename) else None
    return PersonRecord(
        id=person_id,
        external_id=external_id,
        name=parsed.name,
        image_path=image_url(filename),
    )


def list_image_files(directory: Union[str, Path]) -> List[str]:
    """
    List image filenames in a directory, in codepoint order, with
    undecodable bytes replaced.

    Raises:
        OSError: if the directory cannot be read
    """
    return [
        display_filename(name)
        for name in sorted(os.listdir(directory))
        if is_image_file(name)
    ]


def build_catalog(directory: Union[str, Path]) -> List[PersonRecord]:
    """
    Build the people catalog from the image directory.

    Ids are assigned from 1 in listing order before the records are sorted
    by name, so they do not follow the sorted position. An unreadable
    directory yields an empty catalog.
    """
    try:
        filenames = list_image_files(directory)
    except OSError:
        logger.exception("Error reading images directory %s", directory)
        return []

    records = [
        to_person_record(index, filename)
        for index, filename in enumerate(filenames, start=1)
    ]
    return sorted(records, key=lambda record: collation_key(record.name))


def find_person(records: List[PersonRecord], person_id: Optional[int]) -> Optional[PersonRecord]:
    """Find a record by id within one catalog snapshot."""
    if person_id is None:
        return None
    for record in records:
        if record.id == person_id:
            return record
    return None


def search_people(records: List[PersonRecord], query: str) -> List[PersonRecord]:
    """
    Filter records by a search term.

    The name match is case-insensitive; the external id match is a plain
    substring match.
    """
    needle = query.lower()
    return [
        record for record in records
        if needle in record.name.lower()
        or (record.external_id is not None and query in record.external_id)
    ]


def parse_person_id(raw: str) -> Optional[int]:
    """
    Parse a path id leniently: leading whitespace, a sign and a ``0x`` hex
    prefix are accepted and anything after the leading digits is ignored
    ("12abc" -> 12, "0x1f" -> 31).
    """
    sign, rest = _SIGNED_RE.match(raw).groups()
    if rest[:2] in ("0x", "0X"):
        digits, base = _HEX_DIGITS_RE.match(rest, 2).group(), 16
    else:
        digits, base = _DECIMAL_DIGITS_RE.match(rest).group(), 10
    if not digits:
        return None
    value = int(digits, base)
    return -value if sign == "-" else value
