"""Translation source backed by Apple ``.strings`` tables."""

import re
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from ..core.types import ImageHandle
from ..utils.logging import get_module_logger
from .base import BaseTranslationSource
from .memory import NamedAssetsMixin

if TYPE_CHECKING:
    from ..widgets.notifications import LocaleNotifier

logger = get_module_logger('catalog')

# Scanned left to right, so comment markers inside string literals are
# never taken for comments.
TOKEN_PATTERN = re.compile(r'''
    /\*.*?\*/                                            # block comment
  | //[^\n]*                                             # line comment
  | "((?:[^"\\]|\\.)+)" \s* = \s* "((?:[^"\\]|\\.)*)" \s* ;   # "key" = "value";
  | "(?:[^"\\]|\\.)*"                                    # stray literal
''', re.VERBOSE | re.DOTALL)
ESCAPE_PATTERN = re.compile(r'\\(.)', re.DOTALL)
SCALE_SUFFIX_PATTERN = re.compile(r'@[23]x$')

ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '"': '"',
    '\\': '\\',
}


def _unescape(text: str) -> str:
    return ESCAPE_PATTERN.sub(lambda m: ESCAPES.get(m.group(1), m.group(0)), text)


def _read_text(file_path: Path) -> str:
    """Decode a .strings file; Xcode writes UTF-16 with a BOM or UTF-8."""
    raw = file_path.read_bytes()
    if raw.startswith((b'\xff\xfe', b'\xfe\xff')):
        return raw.decode('utf-16')
    return raw.decode('utf-8-sig')


def parse_strings_file(file_path: Path) -> Dict[str, str]:
    """
    Parse a .strings file.

    Format: "key" = "value";

    Entries may share a line; comments (``//`` and ``/* */``) are skipped
    unless they appear inside a string literal. ``\\"``, ``\\\\``, ``\\n``,
    ``\\t`` and ``\\r`` are unescaped in keys and values. An unreadable
    file is logged and yields no entries.

    Args:
        file_path: Path to the .strings file

    Returns:
        Dictionary of key-value pairs
    """
    try:
        content = _read_text(file_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read %s: %s", file_path, e)
        return {}

    entries: Dict[str, str] = {}
    for match in TOKEN_PATTERN.finditer(content):
        if match.group(1) is not None:
            entries[_unescape(match.group(1))] = _unescape(match.group(2))
    return entries


class StringsCatalog(NamedAssetsMixin, BaseTranslationSource):
    """
    Multi-language catalog of ``<lang>.lproj/*.strings`` tables.

    Lookups use the current language first, then the default language.
    Every ``.strings`` table of a language (``Localizable.strings``,
    ``Common.strings``...) is merged into one key space; when two tables
    define the same key the first table (by file name) wins.
    """

    IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.pdf', '.svg')
    EXCLUDED_DIRS = {
        'build', 'Build', 'DerivedData', '.build',
        'Pods', 'Carthage', 'vendor', '.git',
    }

    def __init__(
        self,
        resources_dir: Path,
        default_language: str = 'en',
        language: Optional[str] = None,
        images_dir: Optional[Path] = None,
        fonts: Optional[Iterable[str]] = None,
        notifier: Optional['LocaleNotifier'] = None,
        exclude: Optional[Iterable[str]] = None
    ):
        """
        Initialize and load the catalog.

        Args:
            resources_dir: Directory searched (recursively) for *.lproj folders
            default_language: Fallback language for missing keys
            language: Current language (defaults to the default language)
            images_dir: Optional directory of image assets
            fonts: Font names available to the host
            notifier: Receives a post whenever the language changes
            exclude: Directory names skipped while scanning (defaults to EXCLUDED_DIRS)
        """
        self._init_assets(fonts=fonts)
        self.resources_dir = Path(resources_dir)
        self.images_dir = Path(images_dir) if images_dir else None
        self.default_language = default_language
        self.language = language or default_language
        self.notifier = notifier
        self.excluded_dirs = set(self.EXCLUDED_DIRS if exclude is None else exclude)
        self.tables: Dict[str, Dict[str, str]] = {}
        self.files: Dict[str, List[Path]] = {}

        self.reload()

    def _is_excluded(self, path: Path, root: Path) -> bool:
        return any(part in self.excluded_dirs for part in path.relative_to(root).parts)

    def reload(self) -> None:
        """(Re)load all tables and images from disk."""
        tables: Dict[str, Dict[str, str]] = defaultdict(dict)
        files: Dict[str, List[Path]] = defaultdict(list)

        if not self.resources_dir.exists():
            logger.warning("Resources directory not found: %s", self.resources_dir)
        else:
            for lproj_dir in sorted(self.resources_dir.rglob('*.lproj')):
                if not lproj_dir.is_dir() or self._is_excluded(lproj_dir, self.resources_dir):
                    continue
                language = lproj_dir.stem
                if language == 'Base':
                    continue

                table = tables[language]
                for file_path in sorted(lproj_dir.glob('*.strings')):
                    files[language].append(file_path)
                    for key, value in parse_strings_file(file_path).items():
                        if key in table:
                            logger.debug("Duplicate key %r in %s ignored", key, file_path)
                            continue
                        table[key] = value

        self.tables = dict(tables)
        self.files = dict(files)
        self.images = self._discover_images()

        logger.debug(
            "Loaded %d keys across %d languages",
            sum(len(table) for table in self.tables.values()),
            len(self.tables)
        )

    def _discover_images(self) -> Dict[str, ImageHandle]:
        images: Dict[str, ImageHandle] = {}
        if self.images_dir is None:
            return images
        if not self.images_dir.exists():
            logger.warning("Images directory not found: %s", self.images_dir)
            return images

        for path in sorted(self.images_dir.rglob('*')):
            if path.suffix.lower() not in self.IMAGE_EXTENSIONS or self._is_excluded(path, self.images_dir):
                continue
            name = SCALE_SUFFIX_PATTERN.sub('', path.stem)
            images.setdefault(name, ImageHandle(name=name, path=path))
        return images

    def available_languages(self) -> List[str]:
        """Language codes with at least one table, sorted."""
        return sorted(self.tables)

    def keys(self, language: Optional[str] = None) -> Dict[str, str]:
        """All entries of a language (current language by default)."""
        return dict(self.tables.get(language or self.language, {}))

    def add(self, key: str, value: str, language: Optional[str] = None) -> None:
        """Add or replace an entry in memory (current language by default)."""
        self.tables.setdefault(language or self.language, {})[key] = value

    def update_language(self, language: str) -> bool:
        """
        Switch the current language.

        Observers registered on the notifier are told about the change;
        switching to the language already active notifies nobody.

        Args:
            language: Language code (e.g. 'es', 'pt-BR')

        Returns:
            True if the language is available, False otherwise
        """
        if language not in self.tables:
            logger.warning(
                "Language %r not available (have: %s)",
                language, ', '.join(self.available_languages()) or 'none'
            )
            return False

        if language == self.language:
            return True

        self.language = language
        logger.debug("Language changed to %s", language)
        if self.notifier is not None:
            self.notifier.post(language)
        return True

    def translate(self, key: str) -> Optional[str]:
        for language in (self.language, self.default_language):
            table = self.tables.get(language)
            if table is not None and key in table:
                return table[key]
        return None
