"""logging_config.yaml 기반 로깅 초기화"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config_path: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    CLI 시작 시 한 번 호출. 설정 파일이 없으면 stderr 기본 포맷으로 대체한다.

    Args:
        config_path: logging_config.yaml 경로. None이면 패키지 기본 경로 사용.
        level: pharma_news 로거 레벨 강제 지정 (예: "DEBUG"). None이면 설정 파일 값 사용.
    """
    if config_path is None:
        config_path = str(
            Path(__file__).parent.parent / "config" / "logging_config.yaml"
        )

    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            log_config = yaml.safe_load(f) or {}
        logging.config.dictConfig(log_config)
    else:
        logging.basicConfig(level=logging.INFO, format=DEFAULT_FORMAT)

    if level:
        logging.getLogger("pharma_news").setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """pharma_news.* 로거 반환 (보통 __name__)."""
    return logging.getLogger(name)
