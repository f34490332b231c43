"""Tests for the segmented key parser."""

from localize_ui.core.segments import key_for_segment, segment_keys


class TestKeyForSegment:
    """Test cases for key_for_segment."""

    def test_root_prefixes_keys(self):
        """A root is prefixed to every key."""
        assert key_for_segment(0, 'nav: one, two') == 'nav.one'
        assert key_for_segment(1, 'nav: one, two') == 'nav.two'

    def test_index_out_of_range(self):
        """Indexes past the last key have no key."""
        assert key_for_segment(2, 'nav: one, two') is None
        assert key_for_segment(-1, 'nav: one, two') is None

    def test_without_root(self):
        """Without a root the bare key is returned."""
        assert key_for_segment(0, 'one,two') == 'one'
        assert key_for_segment(1, 'one , two') == 'two'

    def test_absent_spec(self):
        """No spec, no key."""
        assert key_for_segment(0, None) is None

    def test_all_whitespace_removed(self):
        """Whitespace anywhere (including inside keys) is dropped."""
        assert key_for_segment(0, ' settings . tabs :\tgeneral ,\nprivacy') == 'settings.tabs.general'
        assert key_for_segment(1, 'my key, other') == 'other'
        assert key_for_segment(0, 'my key, other') == 'mykey'

    def test_empty_entries(self):
        """Empty keys leave the segment untouched."""
        assert key_for_segment(0, ',two') is None
        assert key_for_segment(1, 'one,,three') is None
        assert key_for_segment(2, 'one,,three') == 'three'
        assert key_for_segment(0, '') is None
        assert key_for_segment(0, 'nav:') is None

    def test_more_than_one_colon_has_no_root(self):
        """Only an exact two-part split defines a root."""
        assert key_for_segment(0, 'a:b:c, d') == 'a:b:c'
        assert key_for_segment(1, 'a:b:c, d') == 'd'

    def test_deterministic(self):
        """Same input, same output."""
        spec = 'nav: one, two'
        assert [key_for_segment(1, spec) for _ in range(3)] == ['nav.two'] * 3


class TestSegmentKeys:
    """Test cases for segment_keys."""

    def test_keys_for_every_segment(self):
        """One entry per segment, None past the spec."""
        assert segment_keys('nav: one, two', 3) == ['nav.one', 'nav.two', None]

    def test_zero_segments(self):
        """No segments, no keys."""
        assert segment_keys('one', 0) == []
