"""Translation sources."""

from .base import BaseTranslationSource
from .memory import DictTranslationSource, NamedAssetsMixin
from .strings_catalog import StringsCatalog, parse_strings_file

__all__ = [
    'BaseTranslationSource',
    'DictTranslationSource',
    'NamedAssetsMixin',
    'StringsCatalog',
    'parse_strings_file',
]
