"""
sinokor.config — 변환 옵션

인코딩/해석 옵션을 기본값이 정해진 dataclass 로 표현합니다.
dict 나 JSON 파일에서도 만들 수 있으며, 키는 snake_case 와
camelCase(zeroChar, omitOneForSmallUnits ...) 를 모두 받습니다.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, TypeVar

from sinokor.errors import NumeralTypeError, OutputModeError
from sinokor.tables import DEFAULT_NEGATIVE_WORD, ZERO_CHAR

OUTPUT_MODES = ("bigint", "string", "number", "auto")

# camelCase 키 → 필드명
_KEY_ALIASES = {
    "zeroChar": "zero_char",
    "omitOneForSmallUnits": "omit_one_for_small_units",
    "omitOneForLargeUnits": "omit_one_for_large_units",
    "useSpacingBetweenLargeUnits": "use_spacing_between_large_units",
    "negativeWord": "negative_word",
}

_T = TypeVar("_T", bound="_Options")


class _Options:
    """EncodeOptions / DecodeOptions 공통 직렬화 로직."""

    def __post_init__(self) -> None:
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            expected = bool if f.type in ("bool", bool) else str
            if not isinstance(value, expected):
                raise NumeralTypeError(
                    f"옵션 {f.name} 은(는) {expected.__name__} 이어야 합니다: {value!r}"
                )

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환."""
        return asdict(self)  # type: ignore[call-overload]

    def to_json(self, indent: int = 2) -> str:
        """JSON 문자열로 변환."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_dict(cls: type[_T], data: Mapping[str, Any]) -> _T:
        """딕셔너리에서 생성. 알 수 없는 키는 무시합니다."""
        if not isinstance(data, Mapping):
            raise NumeralTypeError(
                f"옵션은 JSON 객체(dict)여야 합니다: {type(data).__name__}"
            )
        valid_fields = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        filtered: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)

    @classmethod
    def from_json(cls: type[_T], json_str: str) -> _T:
        """JSON 문자열에서 생성."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def from_file(cls: type[_T], path: str | Path) -> _T:
        """JSON 파일에서 로드."""
        path = Path(path)
        return cls.from_json(path.read_text(encoding="utf-8"))

    @classmethod
    def resolve(cls: type[_T], config: Any = None) -> _T:
        """None / 옵션 객체 / 매핑을 옵션 객체로 통일."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            return cls.from_dict(config)
        raise NumeralTypeError(
            f"옵션은 {cls.__name__} 또는 dict 여야 합니다: {type(config).__name__}"
        )


@dataclass(frozen=True)
class EncodeOptions(_Options):
    """정수 → 한글 수사 변환 옵션."""
    zero_char: str = ZERO_CHAR                      # 0 을 나타낼 글자
    omit_one_for_small_units: bool = True           # 일십 → 십, 일백 → 백
    omit_one_for_large_units: bool = True           # 일만 → 만, 일억 → 억
    use_spacing_between_large_units: bool = False   # 억 이천만 (띄어쓰기)
    negative_word: str = DEFAULT_NEGATIVE_WORD      # 음수 접두어


@dataclass(frozen=True)
class DecodeOptions(_Options):
    """한글 수사 → 정수 해석 옵션."""
    zero_char: str = ZERO_CHAR
    negative_word: str = DEFAULT_NEGATIVE_WORD
    output: str = "auto"                            # bigint / string / number / auto

    def __post_init__(self) -> None:
        if self.output not in OUTPUT_MODES:
            raise OutputModeError(
                f"지원하지 않는 출력 형식입니다: {self.output!r} "
                f"(지원: {', '.join(OUTPUT_MODES)})"
            )
        super().__post_init__()
