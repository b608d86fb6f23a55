"""Decode a front matter block into a caller supplied type.

YAML syntax is handled by PyYAML and the typed mapping by pydantic's
``TypeAdapter``, so any model, dataclass, ``TypedDict`` or plain mapping type
pydantic understands can be used as the target.

Strict decoding goes through pydantic's JSON validation: in Python mode
strict dataclass and ``TypedDict`` targets only accept existing instances,
while JSON mode accepts mappings and still refuses type coercion.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Type, TypeVar
import logging

import yaml
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .config import DecodeOptions, resolve_options
from .errors import FrontMatterDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def load_yaml(text: str, *, options: Optional[DecodeOptions] = None) -> Any:
    """Parse ``text`` as YAML. Empty text loads as ``None``."""

    resolved = resolve_options(options)
    try:
        return yaml.load(text, Loader=resolved.loader)
    # SafeConstructor raises ValueError for impossible timestamps such as 2021-02-30.
    except (yaml.YAMLError, ValueError, RecursionError) as exc:
        logger.debug("Front matter is not valid YAML: %s", exc)
        raise FrontMatterDecodeError(f"Invalid YAML front matter: {exc}", kind="yaml", cause=exc) from exc


def _validate(adapter: TypeAdapter[Any], data: Any, strict: bool) -> Any:
    if not strict:
        return adapter.validate_python(data)
    return adapter.validate_json(to_json(data), strict=True)


def decode(text: str, target: Type[T], *, options: Optional[DecodeOptions] = None) -> T:
    """Decode ``text`` into an instance of ``target``.

    Raises :class:`FrontMatterDecodeError` when the text is not YAML or the
    loaded data does not satisfy ``target``.
    """

    resolved = resolve_options(options)
    data = load_yaml(text, options=resolved)
    target_name = getattr(target, "__name__", target)
    try:
        return _validate(_adapter_for(target), data, resolved.strict)
    except (ValidationError, PydanticSerializationError) as exc:
        logger.debug("Front matter does not match %s: %s", target_name, exc)
        raise FrontMatterDecodeError(
            f"Front matter does not match {target_name}: {exc}",
            kind="validation",
            cause=exc,
        ) from exc


def dump_value(value: Any) -> Any:
    """Return a JSON-ready representation of a decoded value."""

    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return _adapter_for(type(value)).dump_python(value, mode="json")


__all__ = ["decode", "dump_value", "load_yaml"]
