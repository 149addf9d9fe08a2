"""제약 뉴스 기사 데이터 모델"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class Region:
    """기사 지역 구분 값 (news_articles.region)."""

    DOMESTIC = "국내"
    OVERSEAS = "해외"

    ALL = (DOMESTIC, OVERSEAS)


@dataclass(frozen=True)
class RegionLabels:
    """설정(regions.*)에서 읽은 국내/해외 region 표기."""

    domestic: str = Region.DOMESTIC
    overseas: str = Region.OVERSEAS

    @classmethod
    def from_config(cls, config: Optional[Any]) -> "RegionLabels":
        if config is None:
            return cls()
        return cls(
            domestic=str(config.get("regions.domestic", Region.DOMESTIC)),
            overseas=str(config.get("regions.overseas", Region.OVERSEAS)),
        )

    @property
    def all(self) -> Tuple[str, str]:
        return (self.domestic, self.overseas)


_FIELD_ALIASES = {
    "apiKeywords": "api_keywords",
}


@dataclass
class NewsArticle:
    """news_articles 테이블 한 행에 대응하는 기사."""

    id: str = ""
    title: str = ""
    summary: str = ""
    source: str = ""

    # 분류
    region: str = ""
    country: str = ""
    category: str = ""
    api_keywords: List[str] = field(default_factory=list)

    # 참조
    date: str = ""
    url: str = ""

    # 테이블에 추가된 기타 컬럼 (그대로 보존)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_domestic(self) -> bool:
        return self.region == Region.DOMESTIC

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewsArticle":
        """딕셔너리(snake_case 또는 camelCase 키)에서 NewsArticle 생성."""
        known = {name for name in cls.__dataclass_fields__ if name != "extra"}
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = dict(data.get("extra") or {})

        for key, value in data.items():
            if key == "extra":
                continue
            name = _FIELD_ALIASES.get(key, key)
            if name in known:
                values[name] = value
            else:
                extra[key] = value

        keywords = values.get("api_keywords") or []
        if isinstance(keywords, str):
            keywords = [k.strip() for k in keywords.split(",") if k.strip()]
        values["api_keywords"] = list(keywords)
        for name in ("id", "title", "summary", "source", "region", "country", "category", "date", "url"):
            if values.get(name) is None:
                values[name] = ""
            else:
                values[name] = str(values[name])

        return cls(extra=extra, **values)

    def to_dict(self) -> Dict[str, Any]:
        """snake_case 딕셔너리로 변환 (extra 컬럼은 최상위로 펼침)."""
        data: Dict[str, Any] = dict(self.extra)
        data.update({
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "source": self.source,
            "region": self.region,
            "country": self.country,
            "date": self.date,
            "url": self.url,
            "api_keywords": list(self.api_keywords),
            "category": self.category,
        })
        return data
