"""
Localize UI
===========

Key-driven localization for UI components: text, fonts and images are
replaced with localized values when a component loads and whenever the
language changes.

Usage:
    from localize_ui import KeyResolver, StringsCatalog

    catalog = StringsCatalog('./Resources', default_language='en', language='es')
    resolver = KeyResolver(catalog)
    text, key = resolver.resolve_text(None, 'Save')   # ('Guardar', 'Save')

CLI:
    localize-ui text Save --lang es
    localize-ui segment "nav: one, two" --count 3
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.resolver import KeyResolver
from .core.segments import key_for_segment
from .core.fonts import infer_font_key, parse_font_size
from .core.types import FontSpec, ImageHandle, TextResolution

# Translation sources
from .sources.base import BaseTranslationSource
from .sources.memory import DictTranslationSource
from .sources.strings_catalog import StringsCatalog

# Widgets
from .widgets.adapter import LocalizeAdapter
from .widgets.notifications import LocaleNotifier
from .widgets.properties import PropertyStore

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'KeyResolver',
    'key_for_segment',
    'infer_font_key',
    'parse_font_size',
    'FontSpec',
    'ImageHandle',
    'TextResolution',
    'BaseTranslationSource',
    'DictTranslationSource',
    'StringsCatalog',
    'LocalizeAdapter',
    'LocaleNotifier',
    'PropertyStore',
]
