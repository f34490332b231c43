"""Font key inference and font size parsing."""

import math
import re
from typing import Optional

# Order matters: "BoldItalic" resolves to font.bold.
FONT_STYLE_MARKERS = ('regular', 'medium', 'bold', 'light', 'italic')

DEFAULT_FONT_SIZE = 12.0

_SIZE_PATTERN = re.compile(r'^\d+(?:[.,]\d+)?$|^[.,]\d+$')


def infer_font_key(font_name: str) -> str:
    """
    Derive a style key from a font name.

    The first style marker found (case-insensitive) wins and yields
    ``font.<style>``; a name without any marker is used as the key itself.

    Examples:
        >>> infer_font_key('HelveticaNeue-Bold')
        'font.bold'
        >>> infer_font_key('Custom-XYZ')
        'Custom-XYZ'
    """
    lowered = font_name.lower()
    for marker in FONT_STYLE_MARKERS:
        if marker in lowered:
            return f'font.{marker}'
    return font_name


def parse_font_size(text: Optional[str]) -> Optional[float]:
    """
    Parse a localized font size.

    Accepts plain numbers with either a dot or a comma as decimal
    separator ("14", "14.5", "14,5"). Grouping separators, signs,
    exponents and non-finite or non-positive values are rejected.

    Returns:
        The size, or None when the text is not a usable size
    """
    if text is None:
        return None

    candidate = text.strip()
    if not _SIZE_PATTERN.match(candidate):
        return None

    size = float(candidate.replace(',', '.'))
    if not math.isfinite(size) or size <= 0:
        return None
    return size
