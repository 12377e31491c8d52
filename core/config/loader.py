"""
설정 로더

<작업 루트>/config/bullboard.yaml (선택) 로드 후 환경 변수로 덮어씀.
우선순위: 환경 변수 > YAML > 기본값
작업 루트: BULLBOARD_HOME, 없으면 현재 작업 디렉토리
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml

from core.constants import Defaults, EnvVars, Paths, get_home


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정

    불변 데이터 구조로 설정 변경 방지
    """

    db_path: Path
    ledger_id: str
    log_level: str


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _load_yaml(path: Path) -> dict:
    """YAML 파일 로드 (없으면 빈 dict)"""
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"{path.name} 파싱 실패: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError(f"{path.name} 최상위는 매핑이어야 합니다")

    return data


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """설정 로드

    Args:
        path: 설정 파일 경로 (None이면 get_home() / config/bullboard.yaml)
        environ: 환경 변수 (None이면 os.environ)

    Returns:
        Settings 인스턴스

    Raises:
        ConfigLoadError: 파일 형식이 잘못된 경우
    """
    if environ is None:
        environ = os.environ
    if path is None:
        path = get_home(environ) / Paths.CONFIG_FILE

    data = _load_yaml(path)

    db_path = environ.get(EnvVars.DB_PATH) or data.get("db_path") or Defaults.DB_FILENAME
    ledger_id = environ.get(EnvVars.LEDGER_ID) or data.get("ledger_id") or Defaults.LEDGER_ID
    log_level = str(data.get("log_level") or Defaults.LOG_LEVEL).upper()

    return Settings(
        db_path=Path(db_path),
        ledger_id=str(ledger_id),
        log_level=log_level,
    )


_settings: Settings | None = None


def get_settings(path: Path | None = None) -> Settings:
    """Settings 반환 (최초 호출 시 로드 후 캐시)"""
    global _settings
    if _settings is None:
        _settings = load_settings(path)
    return _settings


def reset_settings() -> None:
    """캐시 초기화 (테스트용)"""
    global _settings
    _settings = None
