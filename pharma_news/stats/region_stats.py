"""지역별 기사 수 집계"""

from collections import Counter
from typing import Any, Dict, Iterable, Optional

from pharma_news.dedup.dedup_engine import get_field
from pharma_news.models.article import RegionLabels

OTHER_REGION_LABEL = "기타"


def count_by_region(
    articles: Iterable[Any], labels: Optional[RegionLabels] = None
) -> Dict[str, int]:
    """
    국내/해외/기타 기사 수.

    국내/해외 키는 기사가 없어도 0으로 포함된다.
    """
    labels = labels or RegionLabels()
    counts = Counter()
    for article in articles:
        region = get_field(article, "region")
        counts[region if region in labels.all else OTHER_REGION_LABEL] += 1

    result = {region: counts.get(region, 0) for region in labels.all}
    if counts.get(OTHER_REGION_LABEL):
        result[OTHER_REGION_LABEL] = counts[OTHER_REGION_LABEL]
    return result
