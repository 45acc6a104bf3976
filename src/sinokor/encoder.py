"""
sinokor.encoder — 정수 → 한글 수사

수를 10000 단위 덩어리로 나눈 뒤, 덩어리마다 천·백·십 자리를 읽고
만·억·조·경 단위를 붙여 이어 붙입니다.

    >>> encode(123456789)
    '억이천삼백사십오만육천칠백팔십구'
"""

from __future__ import annotations

import logging
from typing import Any

from sinokor.config import EncodeOptions
from sinokor.errors import NumeralRangeError
from sinokor.normalize import to_integer
from sinokor.tables import (
    CHUNK_BASE,
    DIGITS,
    LARGE_UNIT_CHARS,
    MAX_MAGNITUDE,
    SMALL_UNITS,
)

logger = logging.getLogger(__name__)


def split_chunks(n: int) -> list[int]:
    """음이 아닌 정수를 10000 단위 덩어리로 분해 (낮은 자리부터)."""
    chunks: list[int] = []
    while n > 0:
        n, chunk = divmod(n, CHUNK_BASE)
        chunks.append(chunk)
    return chunks


def chunk_to_hangul(chunk: int, omit_one: bool = True) -> str:
    """
    0~9999 덩어리 하나를 읽기.

    천·백·십 자리는 각각 따로 판단하여, 숫자가 1이고 omit_one 이면
    숫자 글자 없이 단위만 씁니다. 일의 자리는 항상 숫자 글자 하나입니다.

    Examples:
        >>> chunk_to_hangul(1111)
        '천백십일'
        >>> chunk_to_hangul(1111, omit_one=False)
        '일천일백일십일'
        >>> chunk_to_hangul(0)
        ''
    """
    if not 0 <= chunk < CHUNK_BASE:
        raise NumeralRangeError(f"덩어리 값은 0~9999 사이여야 합니다: {chunk}")

    parts: list[str] = []
    for unit_char, unit_value in SMALL_UNITS:
        digit = chunk // unit_value % 10
        if not digit:
            continue
        if digit != 1 or not omit_one:
            parts.append(DIGITS[digit])
        parts.append(unit_char)

    ones = chunk % 10
    if ones:
        parts.append(DIGITS[ones])
    return "".join(parts)


def _render_chunk(chunk: int, unit_index: int, options: EncodeOptions) -> str:
    """덩어리 읽기 + 큰 단위."""
    if unit_index == 0:
        return chunk_to_hangul(chunk, options.omit_one_for_small_units)

    unit_char = LARGE_UNIT_CHARS[unit_index]
    if chunk == 1:
        return unit_char if options.omit_one_for_large_units else DIGITS[1] + unit_char
    return chunk_to_hangul(chunk, options.omit_one_for_small_units) + unit_char


def encode(value: Any, config: EncodeOptions | dict[str, Any] | None = None) -> str:
    """
    정수를 한자어 수사 문자열로 변환.

    Args:
        value: int, 정수 값의 float, 또는 숫자 문자열
        config: EncodeOptions 또는 같은 키를 가진 dict (없으면 기본값)

    Returns:
        한글 수사 문자열. 0 은 zero_char, 음수는 "마이너스 ..." 형태.

    Raises:
        NumeralRangeError: 절댓값이 10^20 이상일 때
        NumeralTypeError / NumeralFormatError: 입력 값이 잘못되었을 때

    Examples:
        >>> encode(1234)
        '천이백삼십사'
        >>> encode(-12)
        '마이너스 십이'
        >>> encode(10000, {"omitOneForLargeUnits": False})
        '일만'
    """
    options = EncodeOptions.resolve(config)
    n = to_integer(value)

    negative = n < 0
    n = abs(n)

    if n == 0:
        return options.zero_char

    if n >= MAX_MAGNITUDE:
        raise NumeralRangeError(f"10^20 이상의 수는 지원하지 않습니다: {n}")

    chunks = split_chunks(n)
    logger.debug("덩어리 분해: %d → %s", n, chunks)

    parts = [
        _render_chunk(chunk, unit_index, options)
        for unit_index, chunk in enumerate(chunks)
        if chunk
    ]
    parts.reverse()

    sep = " " if options.use_spacing_between_large_units else ""
    joined = sep.join(parts)

    if negative:
        return f"{options.negative_word} {joined}"
    return joined
