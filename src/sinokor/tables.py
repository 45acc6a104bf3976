"""
sinokor.tables — 한자어 수사 글자 표

숫자 글자, 작은 단위(십·백·천), 큰 단위(만·억·조·경)와 그 역방향 표.
모듈 로드 시 한 번 만들어지고 이후 변경되지 않습니다.
"""

from __future__ import annotations

from types import MappingProxyType

# ── 숫자 글자 ─────────────────────────────────────────────────────

ZERO_CHAR = "영"                 # 공식 읽기
COLLOQUIAL_ZERO_CHAR = "공"      # 전화번호 등 구어 읽기 (해석 전용)

# 0~9 → 글자 (인코딩용)
DIGITS: tuple[str, ...] = ("영", "일", "이", "삼", "사", "오", "육", "칠", "팔", "구")

# 글자 → 0~9 (해석용, 이체자 포함)
DIGIT_VALUES = MappingProxyType({
    **{glyph: value for value, glyph in enumerate(DIGITS)},
    COLLOQUIAL_ZERO_CHAR: 0,
    "륙": 6,                     # 십륙, 오륙 등
})

# ── 단위 ──────────────────────────────────────────────────────────

CHUNK_BASE = 10_000

# 덩어리(0~9999) 안에서만 쓰이는 단위, 높은 자리부터
SMALL_UNITS: tuple[tuple[str, int], ...] = (
    ("천", 1000),
    ("백", 100),
    ("십", 10),
)
SMALL_UNIT_VALUES = MappingProxyType(dict(SMALL_UNITS))

# 덩어리 위치(unit_index) → 큰 단위 글자. 0번 자리는 단위 없음.
LARGE_UNIT_CHARS: tuple[str, ...] = ("", "만", "억", "조", "경")
LARGE_UNIT_VALUES = MappingProxyType({
    char: CHUNK_BASE ** index
    for index, char in enumerate(LARGE_UNIT_CHARS)
    if char
})

# 지원 한계: 10000^5 (= 10^20) 미만
MAX_MAGNITUDE = CHUNK_BASE ** len(LARGE_UNIT_CHARS)

DEFAULT_NEGATIVE_WORD = "마이너스"
