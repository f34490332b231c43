"""Key resolution engine."""

from .types import FontSpec, ImageHandle, TextResolution
from .fonts import DEFAULT_FONT_SIZE, FONT_STYLE_MARKERS, infer_font_key, parse_font_size
from .segments import key_for_segment, segment_keys
from .resolver import KeyResolver

__all__ = [
    'FontSpec',
    'ImageHandle',
    'TextResolution',
    'DEFAULT_FONT_SIZE',
    'FONT_STYLE_MARKERS',
    'infer_font_key',
    'parse_font_size',
    'key_for_segment',
    'segment_keys',
    'KeyResolver',
]
