"""
sinokor — 한자어 수사(Sino-Korean numeral) 변환기.

1234 ↔ 천이백삼십사, 10^20 미만의 정수를 양방향으로 변환합니다.
"""

__version__ = "0.1.0"

from sinokor.config import DecodeOptions, EncodeOptions, OUTPUT_MODES
from sinokor.decoder import decode, parse_numeral
from sinokor.encoder import chunk_to_hangul, encode, split_chunks
from sinokor.errors import (
    NumeralFormatError,
    NumeralParseError,
    NumeralRangeError,
    NumeralTypeError,
    OutputModeError,
    SinoKoreanError,
)
from sinokor.normalize import to_integer
from sinokor.output import MAX_SAFE_INTEGER, coerce_output

__all__ = [
    # encoder
    "encode",
    "chunk_to_hangul",
    "split_chunks",
    # decoder
    "decode",
    "parse_numeral",
    # normalize
    "to_integer",
    # output
    "coerce_output",
    "MAX_SAFE_INTEGER",
    # config
    "EncodeOptions",
    "DecodeOptions",
    "OUTPUT_MODES",
    # errors
    "SinoKoreanError",
    "NumeralTypeError",
    "NumeralFormatError",
    "NumeralRangeError",
    "NumeralParseError",
    "OutputModeError",
]
