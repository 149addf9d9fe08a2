"""기사 행 정규화 - news_articles 행/JSON → NewsArticle"""

import html as html_module
import re
from typing import Any, Dict, Iterable, List, Optional

from dateutil import parser as dateutil_parser

from pharma_news.models.article import NewsArticle, RegionLabels
from pharma_news.registry.source_registry import SourceRegistry
from pharma_news.utils.config_manager import ConfigManager
from pharma_news.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_REGION_ALIASES: Dict[str, List[str]] = {
    "domestic": ["국내", "domestic", "korea", "kr"],
    "overseas": ["해외", "overseas", "global", "foreign"],
}


class ArticleNormalizer:
    """
    수집/저장된 기사 행을 NewsArticle로 변환.
    HTML 정제, region 표기 통일, 날짜 파싱.
    """

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        registry: Optional[SourceRegistry] = None,
    ) -> None:
        self._config = config
        self._registry = registry

        self._labels = RegionLabels.from_config(config)

        aliases = DEFAULT_REGION_ALIASES
        if config:
            aliases = config.get("regions.aliases", None) or aliases
        if not isinstance(aliases, dict):
            aliases = DEFAULT_REGION_ALIASES
        targets = {"domestic": self._labels.domestic, "overseas": self._labels.overseas}
        self._region_aliases: Dict[str, str] = {}
        for role, label in targets.items():
            self._region_aliases[label.casefold()] = label
            for name in aliases.get(role) or []:
                self._region_aliases[str(name).strip().casefold()] = label

    @property
    def labels(self) -> RegionLabels:
        return self._labels

    def normalize(self, row: Dict[str, Any]) -> NewsArticle:
        """단일 행을 NewsArticle로 변환."""
        if not isinstance(row, dict):
            raise TypeError(f"기사 행은 dict여야 합니다: {type(row).__name__}")

        article = NewsArticle.from_dict(row)
        article.title = self._clean_html(article.title)
        article.summary = self._clean_html(article.summary)
        article.region = self._resolve_region(article.region, article.source)
        article.date = self._normalize_date(article.date)
        article.api_keywords = [str(kw).strip() for kw in article.api_keywords if str(kw).strip()]
        return article

    def normalize_batch(self, rows: Iterable[Dict[str, Any]]) -> List[NewsArticle]:
        """배치 정규화. 실패한 행과 제목 없는 행은 건너뛴다."""
        results = []
        total = 0
        skipped_empty = 0

        for row in rows:
            total += 1
            try:
                article = self.normalize(row)
            except (TypeError, ValueError) as e:
                logger.error("기사 정규화 실패: %s", e)
                continue

            if not article.title:
                skipped_empty += 1
                continue
            results.append(article)

        if skipped_empty > 0:
            logger.info("제목 없는 기사 제외: %d건", skipped_empty)
        logger.info("정규화 완료: %d/%d건", len(results), total)
        return results

    def _resolve_region(self, region: str, source: str) -> str:
        """region 표기 통일. 비어 있으면 매체 레지스트리에서 보정."""
        if not region and self._registry:
            region = self._registry.region_for(source) or ""
        if not region:
            return ""
        return self._region_aliases.get(region.strip().casefold(), region.strip())

    def _clean_html(self, text: str) -> str:
        """HTML 태그 제거, 엔티티 디코딩, 공백 정리."""
        if not text:
            return ""
        text = re.sub(r"<[^>]+>", "", text)
        text = html_module.unescape(text)
        return re.sub(r"\s+", " ", text).strip()

    def _normalize_date(self, date_str: str) -> str:
        """다양한 날짜 형식을 YYYY-MM-DD로 변환. 실패 시 원문 유지."""
        if not date_str:
            return ""
        try:
            return dateutil_parser.parse(date_str).strftime("%Y-%m-%d")
        except (ValueError, TypeError, OverflowError):
            logger.debug("날짜 파싱 실패: %s", date_str)
            return date_str
