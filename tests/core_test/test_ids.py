# tests/core_test/test_ids.py
"""
Tests for the identifier allocator (microdot_api/models/ids.py).
"""
import pytest

from microdot_api.exceptions import IdentifierExhausted
from microdot_api.models.ids import IdAllocator


class TestIdAllocator:

    def test_starts_at_zero(self):
        ids = IdAllocator("node")
        assert ids.next() == 0
        assert ids.next() == 1
        assert ids.next_value == 2

    def test_custom_start(self):
        assert IdAllocator("edge", start=10).next() == 10

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            IdAllocator("node", start=-1)

    def test_advance_past_skips_ahead(self):
        ids = IdAllocator("node")
        ids.advance_past(7)
        assert ids.next() == 8

    def test_advance_past_never_goes_back(self):
        ids = IdAllocator("node")
        for _ in range(5):
            ids.next()
        ids.advance_past(1)
        assert ids.next() == 5

    def test_limit_fails_fast(self):
        ids = IdAllocator("node", limit=2)
        ids.next()
        ids.next()
        with pytest.raises(IdentifierExhausted, match="Node identifier space exhausted"):
            ids.next()
        # No wrap-around after the failure either
        with pytest.raises(IdentifierExhausted):
            ids.next()

    def test_advance_past_limit_fails(self):
        ids = IdAllocator("edge", limit=3)
        with pytest.raises(IdentifierExhausted):
            ids.advance_past(3)
        assert ids.next_value == 0
