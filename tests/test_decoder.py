"""
test_decoder.py — 한글 수사 → 정수 해석 및 출력 형식 테스트

테스트 대상:
  - decoder.parse_numeral / decoder.decode
  - output.coerce_output
  - encode ↔ decode 왕복
"""

from __future__ import annotations

import random

import pytest

from sinokor.config import DecodeOptions, EncodeOptions
from sinokor.decoder import decode, parse_numeral
from sinokor.encoder import encode
from sinokor.errors import (
    NumeralFormatError,
    NumeralParseError,
    NumeralRangeError,
    NumeralTypeError,
    OutputModeError,
)
from sinokor.output import MAX_SAFE_INTEGER, coerce_output


# ── 기본 해석 ─────────────────────────────────────────────────────

class TestDecode:
    """decode 기본 동작."""

    @pytest.mark.parametrize("text, expected", [
        ("일", 1),
        ("십", 10),
        ("십일", 11),
        ("이십", 20),
        ("백일", 101),
        ("백십", 110),
        ("천이백삼십사", 1234),
        ("일천일백일십일", 1111),
        ("만", 10000),
        ("일만", 10000),
        ("만십", 10010),
        ("십일만", 110000),
        ("억", 100000000),
        ("억이천삼백사십오만육천칠백팔십구", 123456789),
        ("억 이천삼백사십오만 육천칠백팔십구", 123456789),
    ])
    def test_values(self, text, expected):
        assert decode(text) == expected

    def test_zero(self):
        assert decode("영") == 0
        assert decode("공") == 0
        assert decode("  영  ") == 0

    def test_custom_zero_char(self):
        assert decode("零", {"zeroChar": "零"}) == 0

    @pytest.mark.parametrize("glyph, expected", [("일", 1), ("십", 10), ("만", 10000), ("륙", 6)])
    def test_zero_char_does_not_shadow_numeral_glyph(self, glyph, expected):
        """zero_char 가 숫자·단위 글자와 같으면 원래 값으로 해석."""
        assert decode(glyph, {"zeroChar": glyph}) == expected

    def test_alternate_six(self):
        assert decode("십륙") == 16
        assert decode("육") == decode("륙") == 6

    def test_implicit_one(self):
        """단위 앞에 숫자가 없으면 1."""
        assert decode("십") == 10
        assert decode("백") == 100
        assert decode("천") == 1000
        assert decode("만") == 10000
        assert decode("조") == 10 ** 12

    def test_separators_removed(self):
        assert decode("천,이백.삼십_사") == 1234
        assert decode("억-이천만") == 120000000
        assert decode("억\t이천만\n") == 120000000

    def test_digit_overwrites_unconsumed_digit(self):
        """단위 없이 이어진 숫자는 마지막 숫자만 남는다."""
        assert decode("이삼") == 3

    def test_unit_order_not_validated(self):
        """큰 단위 순서·중복은 검사 없이 산술 누적."""
        assert decode("만억") == 10000 + 10 ** 8
        assert decode("만만") == 20000
        assert decode("이십삼십") == 50


class TestDecodeNegative:
    """음수 해석."""

    def test_negative(self):
        assert decode("마이너스 십이") == -12
        assert decode("마이너스십이") == -12
        assert decode("  마이너스   억 ") == -(10 ** 8)

    def test_negative_zero_is_zero(self):
        value = decode("마이너스 영", {"output": "bigint"})
        assert value == 0
        assert decode("마이너스 영", {"output": "string"}) == "0"

    def test_negative_word(self):
        assert decode("음 삼", {"negativeWord": "음"}) == -3
        # 기본 접두어는 더 이상 인식하지 않음
        with pytest.raises(NumeralParseError):
            decode("마이너스 삼", {"negativeWord": "음"})


class TestDecodeErrors:
    """해석 오류."""

    @pytest.mark.parametrize("value", [123, None, b"\xec\x9d\xbc"])
    def test_non_string(self, value):
        with pytest.raises(NumeralTypeError):
            decode(value)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty(self, text):
        with pytest.raises(NumeralFormatError):
            decode(text)

    def test_unknown_character(self):
        with pytest.raises(NumeralParseError) as exc_info:
            decode("abc")
        assert exc_info.value.char == "a"
        assert exc_info.value.position == 0
        assert "a" in str(exc_info.value)

    def test_unknown_character_position(self):
        with pytest.raises(NumeralParseError) as exc_info:
            decode("십x")
        assert exc_info.value.char == "x"
        assert exc_info.value.position == 1

    def test_arabic_digits_rejected(self):
        with pytest.raises(NumeralParseError) as exc_info:
            decode("3만")
        assert exc_info.value.char == "3"

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode("하나")


# ── 출력 형식 ─────────────────────────────────────────────────────

class TestOutputModes:
    """output 옵션 및 coerce_output."""

    def test_bigint(self):
        assert decode("경", {"output": "bigint"}) == 10 ** 16

    def test_string(self):
        assert decode("십", {"output": "string"}) == "10"
        assert decode("마이너스 십", {"output": "string"}) == "-10"

    def test_number_within_safe_range(self):
        text = encode(MAX_SAFE_INTEGER)
        assert decode(text, {"output": "number"}) == MAX_SAFE_INTEGER
        assert decode("마이너스 " + text, {"output": "number"}) == -MAX_SAFE_INTEGER

    def test_number_out_of_range(self):
        with pytest.raises(NumeralRangeError):
            decode("경", {"output": "number"})

    def test_auto(self):
        assert decode("천이백삼십사") == 1234
        assert isinstance(decode("천이백삼십사"), int)
        assert decode("경") == "10000000000000000"
        assert decode("마이너스 경") == "-10000000000000000"

    def test_auto_boundary(self):
        assert coerce_output(MAX_SAFE_INTEGER, "auto") == MAX_SAFE_INTEGER
        assert coerce_output(MAX_SAFE_INTEGER + 1, "auto") == str(MAX_SAFE_INTEGER + 1)

    def test_invalid_mode(self):
        with pytest.raises(OutputModeError):
            decode("십", {"output": "hex"})
        with pytest.raises(OutputModeError):
            coerce_output(10, "float")

    def test_parse_numeral_returns_int(self):
        assert parse_numeral("경") == 10 ** 16
        assert parse_numeral("마이너스 조") == -(10 ** 12)


# ── 왕복 ─────────────────────────────────────────────────────────

SAMPLES = [
    1, 7, 10, 15, 20, 42, 99, 100, 105, 110, 111, 999,
    1000, 1010, 1100, 1111, 2005, 9999, 10000, 10001, 12345,
    99999999, 100000000, 987654321, 10 ** 12, 10 ** 16,
    10 ** 16 + 1, 10 ** 20 - 1,
]


def _random_samples(count: int = 300, seed: int = 20) -> list[int]:
    rng = random.Random(seed)
    values = [rng.randrange(10 ** 20) for _ in range(count)]
    # 큰 단위 덩어리가 1 이거나 0 인 경우를 섞는다
    values += [rng.choice([0, 1]) * 10 ** (4 * rng.randrange(1, 5)) + rng.randrange(10) for _ in range(50)]
    return values


class TestRoundTrip:
    """decode(encode(n)) == n."""

    @pytest.mark.parametrize("options", [
        EncodeOptions(),
        EncodeOptions(omit_one_for_large_units=False),
        EncodeOptions(omit_one_for_small_units=False),
        EncodeOptions(use_spacing_between_large_units=True),
    ])
    def test_roundtrip(self, options):
        for n in [0] + SAMPLES + _random_samples():
            text = encode(n, options)
            assert decode(text, {"output": "bigint"}) == n, f"{n} -> {text}"

    def test_roundtrip_negative(self):
        for n in SAMPLES + _random_samples(100, seed=7):
            if n == 0:
                continue
            text = encode(-n)
            assert text.startswith("마이너스 ")
            assert decode(text, DecodeOptions(output="bigint")) == -n, f"{-n} -> {text}"

    def test_roundtrip_safe_numbers(self):
        for n in SAMPLES[:-1]:
            if n <= MAX_SAFE_INTEGER:
                assert decode(encode(n), {"output": "number"}) == n
