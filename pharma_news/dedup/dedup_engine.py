"""국내 기사 중복 제거 엔진"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence

from pharma_news.dedup.title_similarity import (
    DEFAULT_THRESHOLDS,
    SimilarityThresholds,
    are_similar,
)
from pharma_news.models.article import Region, RegionLabels
from pharma_news.utils.config_manager import ConfigManager
from pharma_news.utils.logger import get_logger

logger = get_logger(__name__)


def get_field(article: Any, name: str, default: Any = None) -> Any:
    """dict 형태와 객체 형태 기사 모두에서 필드 값을 읽는다."""
    if isinstance(article, Mapping):
        return article.get(name, default)
    return getattr(article, name, default)


@dataclass
class DuplicateMatch:
    """제거된 기사와, 그 기사를 중복으로 판정하게 만든 기존 기사."""

    dropped: Any
    matched: Any


@dataclass
class DedupResult:
    """중복 제거 결과 (유지 기사 + 제거 내역)."""

    kept: List[Any] = field(default_factory=list)
    removed: List[DuplicateMatch] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return len(self.removed)


class DeduplicationEngine:
    """
    국내 기사 제목 기반 근접 중복 제거.

    입력 순서대로 한 번 순회하며, 국내 기사는 지금까지 유지된 국내 기사와
    제목 유사도를 비교해 중복이면 버린다 (먼저 나온 기사 우선).
    해외 기사와 region이 없는 기사는 비교 없이 그대로 통과한다.

    기사는 title/region 속성을 가진 객체 또는 같은 키를 가진 dict면 된다.
    입력 요소는 수정하지 않고, 출력 요소는 입력 요소 그 자체다.

    사용법:
        engine = DeduplicationEngine.from_config(ConfigManager())
        articles = engine.deduplicate(articles)
    """

    def __init__(
        self,
        thresholds: Optional[SimilarityThresholds] = None,
        domestic_region: str = Region.DOMESTIC,
    ) -> None:
        self._thresholds = thresholds or DEFAULT_THRESHOLDS
        self._domestic_region = domestic_region

    @classmethod
    def from_config(cls, config: ConfigManager) -> "DeduplicationEngine":
        """dedup.* 임계값과 regions.domestic 표기 로드. 환경변수 값(문자열)도 변환한다."""
        defaults = DEFAULT_THRESHOLDS
        thresholds = SimilarityThresholds(
            containment_ratio=float(config.get("dedup.containment_ratio", defaults.containment_ratio)),
            consecutive_words=int(config.get("dedup.consecutive_words", defaults.consecutive_words)),
            min_core_words=int(config.get("dedup.min_core_words", defaults.min_core_words)),
            overlap_ratio=float(config.get("dedup.overlap_ratio", defaults.overlap_ratio)),
        )
        return cls(thresholds=thresholds, domestic_region=RegionLabels.from_config(config).domestic)

    @property
    def thresholds(self) -> SimilarityThresholds:
        return self._thresholds

    def is_domestic(self, article: Any) -> bool:
        return get_field(article, "region") == self._domestic_region

    def deduplicate(self, articles: Iterable[Any]) -> List[Any]:
        """
        중복 국내 기사를 제거한 기사 리스트 반환.

        Args:
            articles: 기사 iterable (입력 순서 = 우선순위). 제너레이터도 가능.

        Returns:
            입력 순서를 유지한 부분 리스트.
        """
        return self.deduplicate_with_report(articles).kept

    def deduplicate_with_report(self, articles: Iterable[Any]) -> DedupResult:
        """deduplicate와 같은 판정을 하고, 제거된 기사와 매칭 대상을 함께 반환."""
        result = DedupResult()
        total = 0

        retained_domestic: List[Any] = []
        for article in articles:
            total += 1
            if not self.is_domestic(article):
                result.kept.append(article)
                continue

            existing = self.find_duplicate(article, retained_domestic)
            if existing is not None:
                result.removed.append(DuplicateMatch(dropped=article, matched=existing))
                logger.debug(
                    "중복 기사 제외: %s ← %s",
                    str(get_field(article, "title", ""))[:50],
                    str(get_field(existing, "title", ""))[:50],
                )
                continue

            result.kept.append(article)
            retained_domestic.append(article)

        logger.info(
            "중복 제거 완료: %d건 → %d건 (국내 중복 %d건 제외)",
            total, len(result.kept), result.removed_count,
        )
        return result

    def find_duplicate(self, article: Any, retained: Sequence[Any]) -> Optional[Any]:
        """retained 중 article과 중복인 첫 국내 기사. 없으면 None."""
        title = get_field(article, "title", "")
        for existing in retained:
            if not self.is_domestic(existing):
                continue
            if are_similar(get_field(existing, "title", ""), title, self._thresholds):
                return existing
        return None


def deduplicate_news(articles: Iterable[Any]) -> List[Any]:
    """기본 임계값으로 국내 기사 중복 제거."""
    return DeduplicationEngine().deduplicate(articles)
