"""뉴스 매체 레지스트리 - 매체별 region/country 조회"""

from typing import Dict, List, Optional

from pharma_news.models.source import NewsSource
from pharma_news.utils.config_manager import ConfigManager
from pharma_news.utils.logger import get_logger

logger = get_logger(__name__)


class SourceRegistry:
    """
    sources_registry.yaml의 매체 목록 관리.

    기사 행에 region이 비어 있을 때 매체 이름으로 region을 보정하는 데 쓴다.

    사용법:
        registry = SourceRegistry(ConfigManager())
        registry.region_for("약업신문")  # "국내"
    """

    def __init__(self, config: ConfigManager) -> None:
        self._config = config
        self._sources: Dict[str, NewsSource] = {}
        self._by_name: Dict[str, NewsSource] = {}
        self._load()

    def _load(self) -> None:
        """sources_registry.yaml에서 매체 로드."""
        registry_data = self._config.get_file_config("sources_registry")
        if not registry_data:
            logger.warning("sources_registry.yaml을 찾을 수 없습니다")
            return

        for source_id, source_data in (registry_data.get("sources") or {}).items():
            source_data = dict(source_data or {})
            source_data.setdefault("id", source_id)
            source = NewsSource.from_dict(source_data)
            self._sources[source.id] = source
            if source.name:
                self._by_name[source.name.casefold()] = source
            logger.debug("매체 로드: %s (region=%s)", source.id, source.region)

        logger.info("매체 레지스트리 로드 완료: %d개 매체", len(self._sources))

    # ===== 단일 조회 =====

    def get(self, source_id: str) -> Optional[NewsSource]:
        """ID로 매체 조회."""
        return self._sources.get(source_id)

    def get_by_name(self, name: Optional[str]) -> Optional[NewsSource]:
        """매체 이름으로 조회 (대소문자 무시, 앞뒤 공백 무시)."""
        if not name:
            return None
        return self._by_name.get(name.strip().casefold())

    def region_for(self, source_name: Optional[str]) -> Optional[str]:
        """매체 이름에 해당하는 region. 등록되지 않은 매체면 None."""
        source = self.get_by_name(source_name)
        return source.region if source and source.region else None

    # ===== 목록 조회 =====

    def get_all(self) -> List[NewsSource]:
        """전체 매체 목록."""
        return list(self._sources.values())

    def get_active_sources(self) -> List[NewsSource]:
        """활성 매체만."""
        return [s for s in self._sources.values() if s.is_active]

    def get_by_region(self, region: str) -> List[NewsSource]:
        """특정 region의 활성 매체."""
        return [
            s for s in self._sources.values()
            if s.is_active and s.region == region
        ]

    @property
    def total_count(self) -> int:
        return len(self._sources)
