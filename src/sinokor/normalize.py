"""
sinokor.normalize — 입력 값 정규화

int / 정수 값의 float / 숫자 문자열을 파이썬 int 로 통일합니다.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any

from sinokor.errors import NumeralFormatError, NumeralRangeError, NumeralTypeError
from sinokor.tables import MAX_MAGNITUDE

_NUMERIC_STRING = re.compile(r"[+-]?[0-9]+")

# 10^20 미만 = 최대 20자리
MAX_DIGITS = len(str(MAX_MAGNITUDE - 1))


def to_integer(value: Any) -> int:
    """
    변환 대상 값을 int 로 정규화.

    Args:
        value: int(numbers.Integral), 정수 값의 float, 또는 부호가 붙을 수 있는 숫자 문자열

    Returns:
        정수 값

    Raises:
        NumeralRangeError: float 가 유한하지 않거나 소수부가 있을 때,
            문자열이 앞자리 0 을 빼고 20자리를 넘을 때
        NumeralFormatError: 문자열이 [+-]?[0-9]+ 형태가 아닐 때
        NumeralTypeError: 그 밖의 타입 (bool 포함)

    Examples:
        >>> to_integer(" -42 ")
        -42
        >>> to_integer(1e4)
        10000
    """
    if isinstance(value, bool):
        raise NumeralTypeError(f"bool 은 숫자로 변환할 수 없습니다: {value!r}")

    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise NumeralRangeError(f"유한한 숫자여야 합니다: {value!r}")
        if not value.is_integer():
            raise NumeralRangeError(f"정수여야 합니다: {value!r}")
        return int(value)

    if isinstance(value, str):
        s = value.strip()
        if not _NUMERIC_STRING.fullmatch(s):
            raise NumeralFormatError(f"숫자 문자열은 0-9 숫자로만 이루어져야 합니다: {value!r}")
        sign = "-" if s[0] == "-" else ""
        digits = s.lstrip("+-").lstrip("0") or "0"
        # int() 의 자릿수 제한(4300자리)에 걸리기 전에 범위 검사
        if len(digits) > MAX_DIGITS:
            raise NumeralRangeError(f"{MAX_DIGITS}자리를 넘는 수는 지원하지 않습니다: {len(digits)}자리")
        return int(sign + digits)

    raise NumeralTypeError(
        f"int, float 또는 숫자 문자열이어야 합니다: {type(value).__name__}"
    )
