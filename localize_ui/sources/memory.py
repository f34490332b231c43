"""In-memory translation source and the image/font lookups sources share."""

from typing import Dict, Iterable, Optional, Set

from ..core.types import FontSpec, ImageHandle
from .base import BaseTranslationSource


class NamedAssetsMixin:
    """
    Image and font lookups by localized name.

    Image and font keys are localized first, so a key such as
    ``image.logo`` may map to a different image name per language. A key
    without a string entry is used as the image or font name directly.
    Classes using the mixin provide ``translate``.
    """

    images: Dict[str, ImageHandle]
    fonts: Set[str]

    def _init_assets(
        self,
        images: Optional[Iterable[ImageHandle]] = None,
        fonts: Optional[Iterable[str]] = None
    ) -> None:
        self.images = {image.name: image for image in images or []}
        self.fonts = set(fonts or [])

    def register_image(self, image: ImageHandle) -> None:
        """Make an image available under its name."""
        self.images[image.name] = image

    def register_font(self, name: str) -> None:
        """Make a font name available."""
        self.fonts.add(name)

    def translate_image(self, key: str) -> Optional[ImageHandle]:
        name = self.translate(key) or key
        return self.images.get(name)

    def translate_font(self, key: str, size: float) -> Optional[FontSpec]:
        name = self.translate(key) or key
        if name not in self.fonts:
            return None
        return FontSpec(name=name, point_size=size)


class DictTranslationSource(NamedAssetsMixin, BaseTranslationSource):
    """Translation source backed by plain dictionaries."""

    def __init__(
        self,
        strings: Optional[Dict[str, str]] = None,
        images: Optional[Iterable[ImageHandle]] = None,
        fonts: Optional[Iterable[str]] = None
    ):
        self.strings: Dict[str, str] = dict(strings or {})
        self._init_assets(images, fonts)

    def add(self, key: str, value: str) -> None:
        """Add or replace a string entry."""
        self.strings[key] = value

    def translate(self, key: str) -> Optional[str]:
        return self.strings.get(key)
