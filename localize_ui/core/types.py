"""Value types exchanged between the resolver, sources and widgets."""

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class FontSpec:
    """A font by name and point size (e.g. ``HelveticaNeue-Bold`` at 17pt)."""
    name: str
    point_size: float


@dataclass(frozen=True)
class ImageHandle:
    """Opaque reference to an image resource."""
    name: str
    path: Optional[Path] = None


class TextResolution(NamedTuple):
    """
    Result of a text resolution.

    ``key`` is the key the caller should keep storing: the input key, or the
    observed value when it was captured as the key.
    """
    text: str
    key: Optional[str]
