"""
로깅 설정 유틸리티

CLI와 Web 모두에서 사용하는 공통 로깅 설정.
- 콘솔: stderr (CLI 출력과 섞이지 않도록)
- 파일: <작업 루트>/data/logs/, TimedRotatingFileHandler, daily (쓰기 불가 시 생략)

사용법:
    from core.logging import setup_logging
    setup_logging("cli")
    setup_logging("web")
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths, get_home


# 로그 설정 상수
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 최대 7일치 파일 유지

# 불필요한 로그를 생성하는 로거 목록 (레벨 조정 대상)
NOISY_LOGGERS = [
    "aiosqlite",       # DB 쿼리마다 executing/completed 로그
    "asyncio",
    "httpx",
    "uvicorn.access",
]


def get_log_file_path(process_name: str, home: Path | None = None) -> Path:
    """로그 파일 경로 반환

    Args:
        process_name: 프로세스 이름 ("cli" 또는 "web")
        home: 작업 루트 (None이면 get_home())
    """
    if home is None:
        home = get_home()

    if process_name == "cli":
        return home / Paths.CLI_LOGS_DIR / f"{process_name}.log"
    elif process_name == "web":
        return home / Paths.WEB_LOGS_DIR / f"{process_name}.log"
    else:
        return home / Paths.LOGS_DIR / f"{process_name}.log"


def setup_logging(
    process_name: str,
    console_level: int = logging.WARNING,
    file_level: int = logging.INFO,
    log_to_file: bool = True,
) -> logging.Logger:
    """로깅 설정 초기화

    Args:
        process_name: 프로세스 이름 ("cli" 또는 "web")
        console_level: 콘솔 로그 레벨 (기본: WARNING)
        file_level: 파일 로그 레벨 (기본: INFO)
        log_to_file: 파일 로그 사용 여부

    Returns:
        설정된 루트 Logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # 루트는 DEBUG로 설정 (핸들러에서 필터링)

    # 기존 핸들러 제거 (중복 방지)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # 1. 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # 2. 파일 핸들러 (daily)
    if log_to_file:
        log_file = get_log_file_path(process_name)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                filename=log_file,
                when="midnight",
                interval=1,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as e:
            # 쓰기 불가 위치 → 콘솔 로그만 사용
            root_logger.warning(
                f"로그 파일을 열 수 없어 콘솔 로그만 사용: {log_file}",
                extra={"error": str(e)},
            )
        else:
            file_handler.suffix = "%Y-%m-%d"  # 백업 파일 형식: cli.log.2026-10-19
            file_handler.setLevel(file_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    # 3. 불필요한 로거 레벨 조정
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.debug(f"로깅 초기화 완료: {process_name}")

    return root_logger
