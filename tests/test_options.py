"""Tests for StoreOptions and PrintScaling."""

import pytest

from xrefstore import PrintScaling, StoreOptions


class TestPrintScaling:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, PrintScaling.DEFAULT),
            ("none", PrintScaling.NONE),
            ("None", PrintScaling.NONE),
            ("default", PrintScaling.DEFAULT),
            (PrintScaling.NONE, PrintScaling.NONE),
        ],
    )
    def test_coerce(self, value, expected):
        assert PrintScaling.coerce(value) is expected

    @pytest.mark.parametrize("value", ["fit", 0, True])
    def test_coerce_rejects(self, value):
        with pytest.raises(ValueError):
            PrintScaling.coerce(value)


class TestStoreOptions:
    def test_defaults(self):
        opts = StoreOptions()
        assert opts.info == {}
        assert opts.print_scaling is PrintScaling.DEFAULT
        assert opts.enable_pdfa_1b is False

    def test_coerces_print_scaling(self):
        assert StoreOptions(print_scaling="none").print_scaling is PrintScaling.NONE

    def test_none_info_becomes_empty(self):
        assert StoreOptions(info=None).info == {}
