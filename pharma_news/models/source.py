"""뉴스 매체 데이터 모델"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class NewsSource:
    """기사 수집 대상 매체 메타데이터."""

    id: str = ""
    name: str = ""
    base_url: str = ""

    # 기사 region 보정용
    region: str = ""
    country: str = ""
    language: str = "ko"

    is_active: bool = True

    @classmethod
    def from_dict(cls, data: Dict) -> "NewsSource":
        """딕셔너리에서 NewsSource 생성."""
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            base_url=data.get("base_url", ""),
            region=data.get("region", ""),
            country=data.get("country", ""),
            language=data.get("language", "ko"),
            is_active=data.get("is_active", True),
        )
