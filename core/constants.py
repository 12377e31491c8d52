"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

import os
from pathlib import Path
from typing import Mapping


class EnvVars:
    """환경 변수 이름"""

    HOME: str = "BULLBOARD_HOME"
    DB_PATH: str = "BULLBOARD_DB_PATH"
    LEDGER_ID: str = "BULLBOARD_LEDGER_ID"


class Defaults:
    """기본값 상수"""

    DB_FILENAME: str = "bullboard.db"
    LEDGER_ID: str = "main"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # Asset.value가 아직 없을 때 표시 문자열
    UNKNOWN_VALUE: str = "??.?? ???"


class Paths:
    """작업 루트 기준 상대 경로 (pathlib 사용 - OS 독립적)

    실제 위치는 get_home() / Paths.XXX
    """

    # 디렉토리
    CONFIG_DIR: Path = Path("config")
    DATA_DIR: Path = Path("data")
    LOGS_DIR: Path = DATA_DIR / "logs"
    CLI_LOGS_DIR: Path = LOGS_DIR / "cli"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    CONFIG_FILE: Path = CONFIG_DIR / "bullboard.yaml"


def get_home(environ: Mapping[str, str] | None = None) -> Path:
    """작업 루트 반환

    BULLBOARD_HOME이 있으면 그 경로, 없으면 현재 작업 디렉토리.
    설치 위치(site-packages)와 무관하게 설정 / 로그 위치가 결정됨.
    """
    if environ is None:
        environ = os.environ

    home = environ.get(EnvVars.HOME)
    if home:
        return Path(home).expanduser().resolve()
    return Path.cwd()
