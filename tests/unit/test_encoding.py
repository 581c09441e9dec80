"""
Boundary Encoding Unit Tests
Tests for core/crypto/encoding.py

Tests:
- hex decoding with and without a required length
- base58 decoding of valid and malformed text
- decoders report failures as values, never raise
"""
import pytest

from core.crypto.encoding import (
    Decoded,
    encode_hex,
    decode_hex,
    encode_base58,
    decode_base58,
)


class TestDecoded:
    """Tests for the Decoded result type."""

    def test_success_is_ok(self):
        result = Decoded.success(b"\x01")

        assert result.ok
        assert result.value == b"\x01"
        assert result.error is None

    def test_failure_is_not_ok(self):
        result = Decoded.failure("bad")

        assert not result.ok
        assert result.value is None
        assert result.error == "bad"


class TestHex:
    """Tests for hex encode/decode."""

    def test_encode_is_lowercase(self):
        assert encode_hex(b"\xde\xad\xbe\xef") == "deadbeef"

    def test_decode_accepts_uppercase(self):
        result = decode_hex("DEADBEEF")

        assert result.ok
        assert result.value == b"\xde\xad\xbe\xef"

    def test_decode_with_matching_length(self):
        result = decode_hex("00" * 64, 64)

        assert result.ok
        assert len(result.value) == 64

    def test_decode_wrong_length(self):
        result = decode_hex("00" * 32, 64)

        assert not result.ok
        assert "expected 64 bytes" in result.error

    @pytest.mark.parametrize("text", ["abc", "zz", "0x00", "de ad", "é0"])
    def test_decode_malformed(self, text):
        """Odd length, non-hex chars, prefixes and whitespace are rejected."""
        result = decode_hex(text)

        assert not result.ok


VALID_KEY_B58 = encode_base58(b"\x01" * 32)


class TestBase58:
    """Tests for base58 encode/decode."""

    def test_known_value(self):
        # "hello world" in the Bitcoin alphabet
        assert encode_base58(b"hello world") == "StV1DL6CwTryKyV"
        assert decode_base58("StV1DL6CwTryKyV").value == b"hello world"

    def test_leading_zero_bytes_preserved(self):
        data = b"\x00\x00\x01"
        encoded = encode_base58(data)

        assert encoded.startswith("11")
        assert decode_base58(encoded).value == data

    def test_decode_wrong_length(self):
        result = decode_base58(encode_base58(b"\x01" * 31), 32)

        assert not result.ok

    @pytest.mark.parametrize(
        "text",
        ["not-base58!!", "0OIl", "", "ключ", VALID_KEY_B58 + " ", VALID_KEY_B58 + "\n", " " + VALID_KEY_B58],
    )
    def test_decode_malformed(self, text):
        """Characters outside the alphabet are reported, not raised."""
        result = decode_base58(text, 32)

        assert not result.ok
        assert result.error
