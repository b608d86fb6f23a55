from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple, Type

import yaml

SAFE_LOADERS: Tuple[type, ...] = tuple(
    loader for loader in (yaml.SafeLoader, getattr(yaml, "CSafeLoader", None)) if loader is not None
)


@dataclass(frozen=True, slots=True)
class DecodeOptions:
    strict: bool = False
    loader: Type[Any] = yaml.SafeLoader

    def __post_init__(self) -> None:
        if not (isinstance(self.loader, type) and issubclass(self.loader, SAFE_LOADERS)):
            raise ValueError(f"Front matter loader must be a safe YAML loader, got {self.loader!r}.")

    def with_overrides(self, **changes: Any) -> "DecodeOptions":
        return replace(self, **changes)


DEFAULT_OPTIONS = DecodeOptions()


def resolve_options(options: Optional[DecodeOptions]) -> DecodeOptions:
    return DEFAULT_OPTIONS if options is None else options


__all__ = ["DecodeOptions", "DEFAULT_OPTIONS", "SAFE_LOADERS", "resolve_options"]
