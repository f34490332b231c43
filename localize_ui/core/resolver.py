"""Key resolution engine for localizable UI attributes."""

from typing import Callable, Optional, TypeVar

from ..sources.base import BaseTranslationSource
from ..utils.logging import get_module_logger
from .fonts import DEFAULT_FONT_SIZE, infer_font_key, parse_font_size
from .types import FontSpec, ImageHandle, TextResolution

logger = get_module_logger('resolver')

T = TypeVar('T')


class KeyResolver:
    """
    Resolves text, fonts and images from a (key, current value) pair.

    A component either carries an explicit key, or shows default-language
    text that doubles as its own key. In the second case the text is
    captured as the key so later language switches resolve through the
    key instead of through whatever text is on screen.

    The resolver keeps no state between calls; captured keys are returned
    to the caller, which stores them. Lookup failures never propagate:
    a source that raises is treated as a miss.

    Usage:
        resolver = KeyResolver(catalog)
        label.text, key = resolver.resolve_text(key, label.text)
    """

    def __init__(self, source: BaseTranslationSource, default_font_size: float = DEFAULT_FONT_SIZE):
        """
        Initialize resolver.

        Args:
            source: Translation source used for every lookup
            default_font_size: Size used when neither a size key nor a font is known
        """
        self.source = source
        self.default_font_size = default_font_size

    def _lookup(self, lookup: Callable[..., Optional[T]], *args) -> Optional[T]:
        try:
            return lookup(*args)
        except Exception:
            logger.warning("Lookup %s%r failed", getattr(lookup, '__name__', 'lookup'), args, exc_info=True)
            return None

    def _localize(self, text: str) -> str:
        """Localized string for ``text`` used as a key, or ``text`` itself."""
        localized = self._lookup(self.source.translate, text)
        return text if localized is None else localized

    def resolve_text(
        self,
        key: Optional[str],
        value: Optional[str],
        update_key: bool = True
    ) -> TextResolution:
        """
        Resolve the text to display.

        Args:
            key: Stored localization key (None or "" when untagged)
            value: Text currently displayed
            update_key: Capture ``value`` as the key when it translated

        Returns:
            TextResolution(text, key). ``key`` is the input key unless the
            value was captured.
        """
        if key:
            return TextResolution(self._localize(key), key)

        if key is not None:
            logger.warning("Empty localization key supplied (value=%r)", value)

        if value is not None:
            localized = self._localize(value)
            if update_key and localized != value:
                logger.debug("Captured %r as localization key", value)
                return TextResolution(localized, value)
            return TextResolution(localized, key)

        return TextResolution('', key)

    def resolve_image(
        self,
        key: Optional[str],
        value: Optional[ImageHandle]
    ) -> Optional[ImageHandle]:
        """
        Resolve the image to display.

        Images cannot serve as keys, so without a key the current image is
        kept.
        """
        if key:
            image = self._lookup(self.source.translate_image, key)
            if image is not None:
                return image
        return value

    def resolve_font(
        self,
        key: Optional[str],
        size_key: Optional[str],
        value: Optional[FontSpec]
    ) -> Optional[FontSpec]:
        """
        Resolve the font to display.

        The style key is the explicit key, or one inferred from the current
        font's name (see :func:`infer_font_key`). The size comes from the
        localized ``size_key``, then the current font, then
        ``default_font_size``.

        Args:
            key: Font style key (e.g. ``font.bold``)
            size_key: Key (or literal) of the font size
            value: Font currently displayed

        Returns:
            The localized font, or ``value`` when none is available
        """
        if key:
            font_key = key
        elif value is not None:
            font_key = infer_font_key(value.name)
        else:
            font_key = ''

        size = self.resolve_font_size(size_key, value)

        if font_key:
            font = self._lookup(self.source.translate_font, font_key, size)
            if font is not None:
                return font
        return value

    def resolve_font_size(self, size_key: Optional[str], value: Optional[FontSpec]) -> float:
        """Point size for a font resolution."""
        if size_key is not None:
            size = parse_font_size(self._localize(size_key))
            if size is not None:
                return size
        if value is not None:
            return value.point_size
        return self.default_font_size
