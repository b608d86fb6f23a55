"""Combine decoded front matter with the document body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from .config import DecodeOptions
from .decoder import decode, dump_value
from .extract import extract

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FrontMatterDocument(Generic[T]):
    metadata: T
    body: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": dump_value(self.metadata),
            "body": self.body,
        }


def parse(document: str, target: Type[T], *, options: Optional[DecodeOptions] = None) -> FrontMatterDocument[T]:
    """Extract the front matter of ``document`` and decode it into ``target``.

    Decode failures propagate as :class:`~yaml_front_matter.errors.FrontMatterDecodeError`;
    no partially built document is returned.
    """

    metadata_block, body = extract(document)
    metadata = decode(metadata_block, target, options=options)
    return FrontMatterDocument(metadata=metadata, body=body)


def parse_metadata(document: str, target: Type[T], *, options: Optional[DecodeOptions] = None) -> T:
    metadata_block, _ = extract(document)
    return decode(metadata_block, target, options=options)


def parse_mapping(document: str, *, options: Optional[DecodeOptions] = None) -> FrontMatterDocument[Dict[str, Any]]:
    return parse(document, Dict[str, Any], options=options)


__all__ = ["FrontMatterDocument", "parse", "parse_mapping", "parse_metadata"]
