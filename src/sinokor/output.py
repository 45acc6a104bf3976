"""
sinokor.output — 해석 결과 출력 형식 변환

bigint  int 그대로
string  10진 문자열
number  IEEE-754 double 로 정확히 표현되는 int (범위 밖이면 예외)
auto    안전 범위 안이면 int, 밖이면 문자열
"""

from __future__ import annotations

import logging

from sinokor.errors import NumeralRangeError, OutputModeError

logger = logging.getLogger(__name__)

# double 로 손실 없이 표현되는 최대 정수 (2^53 - 1)
MAX_SAFE_INTEGER = 2 ** 53 - 1


def is_safe_integer(value: int) -> bool:
    """안전 정수 범위 안인지 여부."""
    return abs(value) <= MAX_SAFE_INTEGER


def to_safe_number(value: int) -> int:
    """안전 정수 범위를 확인한 뒤 그대로 반환."""
    if not is_safe_integer(value):
        raise NumeralRangeError(
            f"결과가 안전 정수 범위(±{MAX_SAFE_INTEGER})를 넘습니다: {value}. "
            f"output 을 'bigint' 또는 'string' 으로 지정하세요"
        )
    return value


def coerce_output(value: int, mode: str = "auto") -> int | str:
    """
    해석된 정수를 요청한 출력 형식으로 변환.

    Raises:
        NumeralRangeError: number 형식인데 안전 범위를 넘을 때
        OutputModeError: 알 수 없는 형식
    """
    if mode == "bigint":
        return value
    if mode == "string":
        return str(value)
    if mode == "number":
        return to_safe_number(value)
    if mode == "auto":
        if is_safe_integer(value):
            return value
        logger.debug("안전 범위 초과, 문자열로 반환: %d", value)
        return str(value)
    raise OutputModeError(f"지원하지 않는 출력 형식입니다: {mode!r}")
