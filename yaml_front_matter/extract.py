"""Split a YAML front matter block from the body of a text document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

DELIMITER = "---"


@dataclass(slots=True)
class _Scan:
    metadata_lines: List[str]
    opened: bool
    closing_index: Optional[int]


def _split_lines(text: str) -> List[str]:
    # Only "\n" is a boundary. "\r\n" counts as one; a final newline adds no empty line.
    if not text:
        return []
    pieces = text.split("\n")
    tail = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if tail:
        lines.append(tail)
    return lines


def _is_delimiter(line: str) -> bool:
    return line.strip() == DELIMITER


def _scan(lines: List[str]) -> _Scan:
    metadata_lines: List[str] = []
    inside_block = False

    for index, line in enumerate(lines):
        if _is_delimiter(line):
            if inside_block:
                return _Scan(metadata_lines=metadata_lines, opened=True, closing_index=index)
            inside_block = True
            continue

        if inside_block:
            metadata_lines.append(line)

    return _Scan(metadata_lines=metadata_lines, opened=inside_block, closing_index=None)


def extract(document: str) -> Tuple[str, str]:
    """Return ``(metadata_block, body)`` for ``document``.

    The metadata block holds every line between the first two ``---`` lines,
    each terminated by a newline. The body holds every line after the closing
    ``---`` joined with newlines and without a trailing terminator.

    Missing delimiters never raise: when no closing ``---`` is found the block
    keeps whatever was collected after an opening ``---`` and the body is empty.
    """

    lines = _split_lines(document)
    scan = _scan(lines)

    metadata = "".join(f"{line}\n" for line in scan.metadata_lines)
    if scan.closing_index is None:
        if lines:
            logger.debug(
                "No closing front matter delimiter (opened=%s, lines=%s); body left empty",
                scan.opened,
                len(lines),
            )
        return metadata, ""

    body = "\n".join(lines[scan.closing_index + 1 :])
    return metadata, body


def has_front_matter(document: str) -> bool:
    """True when ``document`` contains both an opening and a closing ``---`` line."""

    return _scan(_split_lines(document)).closing_index is not None


__all__ = ["DELIMITER", "extract", "has_front_matter"]
