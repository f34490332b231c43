"""Segmented key syntax: ``[root ":"] key ("," key)*``."""

import re
from typing import List, Optional

_WHITESPACE = re.compile(r'\s+')


def key_for_segment(index: int, spec: Optional[str]) -> Optional[str]:
    """
    Return the key addressing one segment of a multi-segment control.

    ``"nav: one, two"`` gives ``nav.one`` for index 0 and ``nav.two`` for
    index 1; without a root (``"one, two"``) the bare keys are returned.
    Only a spec with exactly one ``:`` has a root.

    Args:
        index: Segment position
        spec: Segmented key spec, may be None

    Returns:
        The key, or None when the segment has no key (the caller leaves
        that segment untouched)
    """
    if spec is None:
        return None

    compact = _WHITESPACE.sub('', spec)
    root: Optional[str] = None

    parts = compact.split(':')
    if len(parts) == 2:
        root, compact = parts

    keys = compact.split(',')
    if index < 0 or index >= len(keys):
        return None

    key = keys[index]
    if not key:
        return None
    if root is None:
        return key
    return f'{root}.{key}'


def segment_keys(spec: Optional[str], count: int) -> List[Optional[str]]:
    """Keys for segments ``0..count-1`` of a control."""
    return [key_for_segment(index, spec) for index in range(count)]
