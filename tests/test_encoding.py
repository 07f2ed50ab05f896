"""
Tests for the exactly-sized convenience layer (safebuf/core/encoding.py).
"""

import pytest

from safebuf.core.constants import MAX_INPUT_BYTES
from safebuf.core.encoding import (
    CODECS, b64_decoded_size_bound, b64d, b64e, html_encoded_size, html_escape,
    transcode, url_encoded_size, url_quote, url_unquote,
)
from safebuf.core.errors import MalformedInput, OverflowDetected


# ============ Sizing ============

class TestSizing:
    def test_html_size(self):
        assert html_encoded_size(b"<a>") == 11

    def test_url_size(self):
        assert url_encoded_size("a b") == 5

    def test_b64_decode_bound(self):
        assert b64_decoded_size_bound(b"TWFuIQ==") == 6

    def test_sizes_are_exact(self, sample_bytes):
        for s in sample_bytes:
            assert len(html_escape(s)) == html_encoded_size(s)
            assert len(url_quote(s)) == url_encoded_size(s)


# ============ Helpers ============

class TestHelpers:
    def test_html_escape_accepts_text(self):
        assert html_escape("it's") == b"it&#39;s"

    def test_url_quote_returns_text(self):
        assert url_quote("a b/c") == "a%20b%2fc"

    def test_url_unquote(self):
        assert url_unquote("caf%C3%A9") == "café".encode("utf-8")

    def test_url_unquote_malformed_raises(self):
        with pytest.raises(MalformedInput):
            url_unquote("%2g")

    def test_b64e_returns_text(self):
        assert b64e(b"Man") == "TWFu"

    def test_b64d_strict_by_default(self):
        with pytest.raises(MalformedInput):
            b64d("TW-Fu")

    @pytest.mark.parametrize("s", ["====", "TQ=A", "TQ==TWFu"])
    def test_b64d_rejects_misplaced_padding(self, s):
        with pytest.raises(MalformedInput):
            b64d(s)

    def test_b64d_lenient(self):
        assert b64d("TW-Fu", strict=False) == b"Man"

    def test_b64d_length_cap(self):
        with pytest.raises(ValueError, match="too long"):
            b64d("A" * (MAX_INPUT_BYTES + 4))


# ============ Dispatcher ============

class TestTranscode:
    def test_registry_holds_five_transcoders(self):
        assert sum(len(ops) for ops in CODECS.values()) == 5
        assert "decode" not in CODECS["html"]

    def test_fixed_capacity_overflow_raises(self):
        with pytest.raises(OverflowDetected):
            transcode("html", "encode", b"<<", capacity=9)

    def test_fixed_capacity_success(self):
        assert transcode("url", "encode", b"ab", capacity=64) == b"ab"

    def test_unknown_operation(self):
        with pytest.raises(ValueError, match="Unknown operation"):
            transcode("html", "decode", b"&#60;")

    def test_keyword_options_forwarded(self):
        assert transcode("b64", "decode", b"TWFu\x00TWFu", stop_at_nul=True) == b"Man"
