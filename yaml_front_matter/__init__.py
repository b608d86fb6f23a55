"""Parse YAML front matter from text documents into typed records."""

from .config import DEFAULT_OPTIONS, DecodeOptions
from .decoder import decode, load_yaml
from .document import FrontMatterDocument, parse, parse_mapping, parse_metadata
from .errors import FrontMatterDecodeError, FrontMatterError
from .extract import DELIMITER, extract, has_front_matter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_OPTIONS",
    "DELIMITER",
    "DecodeOptions",
    "FrontMatterDecodeError",
    "FrontMatterDocument",
    "FrontMatterError",
    "decode",
    "extract",
    "has_front_matter",
    "load_yaml",
    "parse",
    "parse_mapping",
    "parse_metadata",
]
