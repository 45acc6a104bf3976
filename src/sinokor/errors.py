"""
sinokor.errors — 예외 분류

모든 예외는 SinoKoreanError 를 상속하며, 동시에 대응되는 내장 예외
(TypeError / ValueError)도 상속하므로 어느 쪽으로든 잡을 수 있습니다.
"""

from __future__ import annotations


class SinoKoreanError(Exception):
    """sinokor 예외의 공통 기반 클래스."""


class NumeralTypeError(SinoKoreanError, TypeError):
    """허용되지 않는 입력 타입."""


class NumeralFormatError(SinoKoreanError, ValueError):
    """문자열 입력이 요구되는 형태와 맞지 않음."""


class NumeralRangeError(SinoKoreanError, ValueError):
    """
    값의 범위 문제.

    - 인코딩 대상의 크기가 10^20 이상
    - 유한하지 않거나 정수가 아닌 실수 입력
    - number 출력이 안전 정수 범위를 넘음
    """


class NumeralParseError(SinoKoreanError, ValueError):
    """해석 중 알 수 없는 글자를 만남."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"알 수 없는 글자입니다: {char!r} (위치 {position})")


class OutputModeError(SinoKoreanError, ValueError):
    """지원하지 않는 출력 형식 설정."""
