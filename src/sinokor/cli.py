"""
sinokor.cli — 명령행 인터페이스

Usage:
    sinokor encode <value>...   정수 → 한글 수사
    sinokor decode <text>...    한글 수사 → 정수
"""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from sinokor.config import OUTPUT_MODES

logger = logging.getLogger("sinokor")


def _setup_logging(verbose: bool) -> None:
    """로깅 설정."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(name)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )
    # 루트 로거가 이미 설정된 경우에도 -v 가 적용되도록
    logging.getLogger("sinokor").setLevel(level)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="상세 로그 출력")
@click.version_option(package_name="sinokor")
def main(verbose: bool) -> None:
    """sinokor — 한자어 수사 변환기 (1234 ↔ 천이백삼십사)"""
    _setup_logging(verbose)


# ── encode ────────────────────────────────────────────────────────

@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("values", nargs=-1, required=True)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              default=None, help="옵션 JSON 파일")
@click.option("--zero-char", default=None, help="0 을 나타낼 글자 (기본: 영)")
@click.option("--negative-word", default=None, help="음수 접두어 (기본: 마이너스)")
@click.option("--keep-one-small", is_flag=True, default=False,
              help="십·백·천 앞의 '일' 을 생략하지 않음 (일십, 일백)")
@click.option("--keep-one-large", is_flag=True, default=False,
              help="만·억·조·경 앞의 '일' 을 생략하지 않음 (일만, 일억)")
@click.option("--spacing", is_flag=True, default=False,
              help="큰 단위 사이를 띄어 씀 (억 이천만)")
@click.option("-o", "--output", type=click.Path(), default=None, help="결과 저장 경로 (JSON)")
def encode(
    values: tuple[str, ...],
    config_path: str | None,
    zero_char: str | None,
    negative_word: str | None,
    keep_one_small: bool,
    keep_one_large: bool,
    spacing: bool,
    output: str | None,
) -> None:
    """정수를 한글 수사로 변환합니다.

    \b
    예시:
      sinokor encode 1234                 # 천이백삼십사
      sinokor encode 10000 --keep-one-large  # 일만
      sinokor encode -- -12               # 마이너스 십이
    """
    from sinokor.config import EncodeOptions
    from sinokor.encoder import encode as _encode
    from sinokor.errors import SinoKoreanError

    overrides: dict[str, Any] = {}
    if zero_char is not None:
        overrides["zero_char"] = zero_char
    if negative_word is not None:
        overrides["negative_word"] = negative_word
    if keep_one_small:
        overrides["omit_one_for_small_units"] = False
    if keep_one_large:
        overrides["omit_one_for_large_units"] = False
    if spacing:
        overrides["use_spacing_between_large_units"] = True
    options = _load_options(EncodeOptions, config_path, overrides)
    logger.debug("인코딩 옵션: %s", options)

    results = []
    for value in values:
        try:
            text = _encode(value, options)
        except SinoKoreanError as e:
            click.echo(f"❌ {value}: {e}", err=True)
            raise SystemExit(1)
        click.echo(text)
        results.append({"input": value, "text": text})

    if output:
        _save_json({"type": "encode", "options": options.to_dict(), "results": results}, output)
        logger.info("저장됨: %s", output)


# ── decode ────────────────────────────────────────────────────────

@main.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              default=None, help="옵션 JSON 파일")
@click.option("-f", "--format", "output_mode", type=click.Choice(OUTPUT_MODES), default=None,
              help="출력 형식 (기본: auto)")
@click.option("--zero-char", default=None, help="0 을 나타낼 글자 (기본: 영)")
@click.option("--negative-word", default=None, help="음수 접두어 (기본: 마이너스)")
@click.option("-o", "--output", type=click.Path(), default=None, help="결과 저장 경로 (JSON)")
def decode(
    texts: tuple[str, ...],
    config_path: str | None,
    output_mode: str | None,
    zero_char: str | None,
    negative_word: str | None,
    output: str | None,
) -> None:
    """한글 수사를 정수로 해석합니다.

    \b
    예시:
      sinokor decode 천이백삼십사          # 1234
      sinokor decode "마이너스 십이"        # -12
      sinokor decode 경 -f string          # 10000000000000000
    """
    from sinokor.config import DecodeOptions
    from sinokor.decoder import decode as _decode
    from sinokor.errors import SinoKoreanError

    overrides: dict[str, Any] = {}
    if output_mode is not None:
        overrides["output"] = output_mode
    if zero_char is not None:
        overrides["zero_char"] = zero_char
    if negative_word is not None:
        overrides["negative_word"] = negative_word
    options = _load_options(DecodeOptions, config_path, overrides)
    logger.debug("해석 옵션: %s", options)

    results = []
    for text in texts:
        try:
            value = _decode(text, options)
        except SinoKoreanError as e:
            click.echo(f"❌ {text}: {e}", err=True)
            raise SystemExit(1)
        click.echo(str(value))
        results.append({"input": text, "value": value})

    if output:
        _save_json({"type": "decode", "options": options.to_dict(), "results": results}, output)
        logger.info("저장됨: %s", output)


# ── 유틸리티 ──────────────────────────────────────────────────────

def _load_options(cls: type, config_path: str | None, overrides: dict[str, Any]) -> Any:
    """옵션 파일 로드 후 명령행 값으로 덮어쓰기. 실패하면 종료."""
    from sinokor.errors import SinoKoreanError

    try:
        options = cls.from_file(config_path) if config_path else cls()
        return dataclasses.replace(options, **overrides)
    except (SinoKoreanError, json.JSONDecodeError, OSError) as e:
        click.echo(f"❌ 옵션 오류: {e}", err=True)
        raise SystemExit(1)


def _save_json(data: dict, path: str) -> None:
    """결과를 JSON 파일로 저장."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


if __name__ == "__main__":
    main()
