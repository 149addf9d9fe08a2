"""pharma_news/config 디렉토리 YAML 설정 로더"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pharma_news.utils.logger import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "PHARMA_NEWS_"


class ConfigManager:
    """
    중복 제거 임계값(dedup.*), region 표기(regions.*), 매체 목록(sources_registry)을
    한 번에 읽어 둔다. 파일별 최상위 키는 하나의 네임스페이스로 합쳐진다.

    값 조회는 config.get("dedup.overlap_ratio")처럼 점으로 구분하며,
    PHARMA_NEWS_DEDUP_OVERLAP_RATIO 환경변수가 있으면 그 문자열이 우선한다.
    """

    def __init__(self, config_dir: Optional[str] = None) -> None:
        """
        Args:
            config_dir: 설정 파일 디렉토리 경로. None이면 패키지 기본 경로 사용.
        """
        if config_dir is None:
            config_dir = str(Path(__file__).parent.parent / "config")

        self._config_dir = config_dir
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._merged: Dict[str, Any] = {}
        self._load_all()

    @property
    def config_dir(self) -> str:
        return self._config_dir

    def _load_all(self) -> None:
        """logging_*.yaml을 제외한 YAML 파일 로드. 깨진 파일은 로그 후 건너뜀."""
        config_path = Path(self._config_dir)
        if not config_path.exists():
            logger.warning("설정 디렉토리가 존재하지 않습니다: %s", self._config_dir)
            return

        for yaml_file in sorted(config_path.glob("*.yaml")):
            if yaml_file.name.startswith("logging"):
                continue  # 로깅 설정은 setup_logging에서 처리
            try:
                data = self.load(str(yaml_file))
            except (OSError, yaml.YAMLError) as e:
                logger.error("설정 파일 로드 실패: %s - %s", yaml_file.name, e)
                continue
            if not isinstance(data, dict):
                logger.error("설정 파일 최상위가 매핑이 아닙니다: %s", yaml_file.name)
                continue
            self._configs[yaml_file.stem] = data
            self._merged.update(data)
            logger.debug("설정 파일 로드 완료: %s", yaml_file.name)

    def load(self, filepath: str) -> Dict[str, Any]:
        """YAML 파일 하나를 읽는다. 빈 파일은 빈 딕셔너리."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else {}

    def get(self, key_path: str, default: Any = None) -> Any:
        """점 구분 키로 값 조회. 환경변수 값은 변환 없이 문자열로 반환."""
        env_value = self._env_override(key_path)
        if env_value is not None:
            return env_value

        current: Any = self._merged
        for key in key_path.split("."):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    def get_section(self, section: str) -> Dict[str, Any]:
        """최상위 섹션 (예: "regions"). 없으면 빈 딕셔너리."""
        return self._merged.get(section, {})

    def get_file_config(self, filename: str) -> Dict[str, Any]:
        """파일 단위 설정 (예: "sources_registry"). 없으면 빈 딕셔너리."""
        return self._configs.get(filename, {})

    def _env_override(self, key_path: str) -> Optional[str]:
        """
        환경변수 오버라이드 확인.
        "dedup.overlap_ratio" → "PHARMA_NEWS_DEDUP_OVERLAP_RATIO"
        """
        env_key = ENV_PREFIX + key_path.upper().replace(".", "_")
        return os.environ.get(env_key)
