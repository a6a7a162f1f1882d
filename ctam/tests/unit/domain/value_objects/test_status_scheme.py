"""
Unit tests for item status schemes.
"""

import pytest

from ctam.domain.enums import ItemStatus
from ctam.domain.value_objects import (
    BINARY_SCHEME,
    TERNARY_SCHEME,
    StatusScheme,
    get_status_scheme,
)


class TestStatusScheme:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (ItemStatus.PASS, 1.0),
            (ItemStatus.PARTIAL, 0.5),
            (ItemStatus.FAIL, 0.0),
            (ItemStatus.NOT_APPLICABLE, 0.0),
            ("pass", 1.0),
            ("unknown", 0.0),
        ],
    )
    def test_ternary_weights(self, status, expected):
        assert TERNARY_SCHEME.weight(status) == expected

    def test_binary_scheme_has_no_partial(self):
        assert BINARY_SCHEME.has_partial is False
        assert BINARY_SCHEME.supports(ItemStatus.PARTIAL) is False
        assert BINARY_SCHEME.weight(ItemStatus.PARTIAL) == 0.0
        assert TERNARY_SCHEME.has_partial is True

    def test_weights_are_read_only(self):
        scheme = StatusScheme(name="custom", weights={ItemStatus.PASS: 1.0})

        with pytest.raises(TypeError):
            scheme.weights[ItemStatus.FAIL] = 0.0  # type: ignore[index]

    def test_supports_rejects_unknown_values(self):
        assert TERNARY_SCHEME.supports("pass") is True
        assert TERNARY_SCHEME.supports("bogus") is False


class TestGetStatusScheme:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("ternary", TERNARY_SCHEME), ("BINARY", BINARY_SCHEME)],
    )
    def test_lookup_is_case_insensitive(self, name, expected):
        assert get_status_scheme(name) is expected

    def test_unknown_scheme(self):
        with pytest.raises(ValueError, match="Unknown item status scheme"):
            get_status_scheme("quaternary")
