"""Tests for pure header matching (core/header.py)."""

from __future__ import annotations

import pytest

from cachedir.core.header import match_header
from cachedir.core.models import TagState
from cachedir.utils.constants import SIGNATURE


class TestMatchHeader:
    def test_exact_signature_is_present(self) -> None:
        assert match_header(SIGNATURE) is TagState.PRESENT

    def test_trailing_bytes_are_ignored(self) -> None:
        assert match_header(SIGNATURE + b"\n# comment\n") is TagState.PRESENT

    def test_empty_is_wrong_header(self) -> None:
        assert match_header(b"") is TagState.WRONG_HEADER

    @pytest.mark.parametrize("cut", [1, 2, 10])
    def test_truncated_signature_is_wrong_header(self, cut: int) -> None:
        assert match_header(SIGNATURE[:-cut]) is TagState.WRONG_HEADER

    def test_wrong_content_is_wrong_header(self) -> None:
        assert match_header(b"Signature: wrong") is TagState.WRONG_HEADER

    def test_last_byte_mismatch_is_wrong_header(self) -> None:
        data = SIGNATURE[:-1] + b"6"
        assert match_header(data) is TagState.WRONG_HEADER

    def test_case_is_significant(self) -> None:
        assert match_header(SIGNATURE.upper()) is TagState.WRONG_HEADER

    def test_leading_whitespace_is_wrong_header(self) -> None:
        assert match_header(b" " + SIGNATURE) is TagState.WRONG_HEADER


class TestSignatureConstant:
    def test_value(self) -> None:
        assert SIGNATURE == b"Signature: 8a477f597d28d172789f06886806bc55"

    def test_length(self) -> None:
        assert len(SIGNATURE) == 43
