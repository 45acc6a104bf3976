"""
sinokor.decoder — 한글 수사 → 정수

문법 검증 없이 왼쪽부터 한 글자씩 읽으며 세 레지스터에 누적합니다.

  current  마지막으로 읽은 숫자 (단위에 소비되면 0)
  section  현재 큰 단위 묶음 안의 값 (천·백·십 누적)
  total    끝난 큰 단위 묶음들의 합

단위 앞에 숫자가 없으면 1로 봅니다 (십 = 10, 만 = 10000).
큰 단위의 순서·중복은 검사하지 않고 산술적으로 그대로 더합니다.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from sinokor.config import DecodeOptions
from sinokor.errors import NumeralFormatError, NumeralParseError, NumeralTypeError
from sinokor.output import coerce_output
from sinokor.tables import (
    COLLOQUIAL_ZERO_CHAR,
    DEFAULT_NEGATIVE_WORD,
    DIGIT_VALUES,
    LARGE_UNIT_VALUES,
    SMALL_UNIT_VALUES,
    ZERO_CHAR,
)

logger = logging.getLogger(__name__)

# 공백, 쉼표, 마침표, 하이픈, 밑줄은 구분자로 보고 제거
_SEPARATORS = re.compile(r"[\s,._-]+")


def _is_numeral_glyph(ch: str) -> bool:
    """숫자나 단위 글자인지 여부."""
    return ch in DIGIT_VALUES or ch in SMALL_UNIT_VALUES or ch in LARGE_UNIT_VALUES


def _accumulate(s: str) -> int:
    """구분자가 제거된 수사 문자열을 누적 계산."""
    total = 0
    section = 0
    current = 0
    for position, ch in enumerate(s):
        if ch in DIGIT_VALUES:
            current = DIGIT_VALUES[ch]
        elif ch in SMALL_UNIT_VALUES:
            section += (current or 1) * SMALL_UNIT_VALUES[ch]
            current = 0
        elif ch in LARGE_UNIT_VALUES:
            total += ((section + current) or 1) * LARGE_UNIT_VALUES[ch]
            section = 0
            current = 0
        else:
            raise NumeralParseError(ch, position)
    return total + section + current


def parse_numeral(
    text: str,
    negative_word: str = DEFAULT_NEGATIVE_WORD,
    zero_char: str = ZERO_CHAR,
) -> int:
    """
    한글 수사 문자열을 int 로 해석.

    Args:
        text: 해석할 문자열 (예: "마이너스 천이백삼십사", "억 이천만")
        negative_word: 음수 접두어
        zero_char: 영 대신 쓰인 0 글자 (영, 공 은 항상 인식).
            숫자·단위 글자와 겹치면 그 글자의 원래 값으로 해석합니다.

    Returns:
        해석된 정수. 0 에는 부호를 붙이지 않습니다.

    Raises:
        NumeralTypeError: text 가 문자열이 아닐 때
        NumeralFormatError: 공백을 제거하면 빈 문자열일 때
        NumeralParseError: 알 수 없는 글자가 있을 때
    """
    if not isinstance(text, str):
        raise NumeralTypeError(f"문자열이어야 합니다: {type(text).__name__}")

    s = text.strip()
    if not s:
        raise NumeralFormatError("빈 문자열은 해석할 수 없습니다")

    negative = False
    if negative_word and s.startswith(negative_word):
        negative = True
        s = s[len(negative_word):].strip()

    s = _SEPARATORS.sub("", s)

    if s in (ZERO_CHAR, COLLOQUIAL_ZERO_CHAR):
        return 0
    if s == zero_char and not _is_numeral_glyph(zero_char):
        return 0

    result = _accumulate(s)
    if negative and result:
        result = -result

    logger.debug("해석: %r → %d", text, result)
    return result


def decode(text: str, config: DecodeOptions | dict[str, Any] | None = None) -> int | str:
    """
    한자어 수사 문자열을 요청한 형식의 값으로 해석.

    Args:
        text: 한글 수사 문자열
        config: DecodeOptions 또는 같은 키를 가진 dict.
            output 은 bigint / string / number / auto (기본 auto)

    Returns:
        output 에 따른 int 또는 str

    Examples:
        >>> decode("천이백삼십사")
        1234
        >>> decode("마이너스 십이")
        -12
        >>> decode("경", {"output": "string"})
        '10000000000000000'
    """
    options = DecodeOptions.resolve(config)
    value = parse_numeral(text, options.negative_word, options.zero_char)
    return coerce_output(value, options.output)
