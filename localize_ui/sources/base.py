"""Base interface for translation sources."""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.types import FontSpec, ImageHandle


class BaseTranslationSource(ABC):
    """
    Lookup backend used by the key resolver.

    A source answers three questions for the active language: the string
    for a key, the image for a key and the font for a key at a size.
    Every lookup returns None for a miss; sources never raise for
    unknown keys.
    """

    @abstractmethod
    def translate(self, key: str) -> Optional[str]:
        """
        Look up the localized string for a key.

        Args:
            key: Localization key

        Returns:
            Localized text, or None if the key is unknown
        """
        pass

    @abstractmethod
    def translate_image(self, key: str) -> Optional[ImageHandle]:
        """
        Look up the localized image for a key.

        Args:
            key: Localization key naming the image

        Returns:
            Image handle, or None if no such image exists
        """
        pass

    @abstractmethod
    def translate_font(self, key: str, size: float) -> Optional[FontSpec]:
        """
        Look up the localized font for a style key.

        Args:
            key: Style key (e.g. ``font.bold``) or a font name
            size: Point size of the requested font

        Returns:
            Font spec, or None if the font is not available
        """
        pass

    def has_key(self, key: str) -> bool:
        """Check if the source has a string for a key."""
        return self.translate(key) is not None
