"""ArticleNormalizer 테스트"""

import pytest

from pharma_news.models.article import NewsArticle, Region
from pharma_news.normalizer.article_normalizer import ArticleNormalizer
from pharma_news.registry.source_registry import SourceRegistry
from pharma_news.utils.config_manager import ConfigManager


# ─── Fixture ────────────────────────────────────────────

def _make_row(**overrides):
    defaults = {
        "id": "a1",
        "title": "한미약품 당뇨병 치료제 국산화 성공",
        "summary": "한미약품이 당뇨병 치료제 원료 국산화에 성공했다.",
        "source": "약업신문",
        "region": "국내",
        "country": "KR",
        "date": "2026-02-14",
        "url": "https://www.yakup.com/news/1",
        "api_keywords": ["메트포르민"],
        "category": "당뇨병",
    }
    defaults.update(overrides)
    return defaults


@pytest.fixture
def normalizer(config_manager: ConfigManager) -> ArticleNormalizer:
    return ArticleNormalizer(config_manager, SourceRegistry(config_manager))


# ═══════════════════════════════════════════════════════════
# 모델 테스트
# ═══════════════════════════════════════════════════════════

class TestNewsArticleModel:
    """NewsArticle 변환 테스트."""

    def test_from_dict_snake_case(self):
        article = NewsArticle.from_dict(_make_row())
        assert article.api_keywords == ["메트포르민"]
        assert article.is_domestic

    def test_from_dict_camel_case_keywords(self):
        row = _make_row()
        del row["api_keywords"]
        row["apiKeywords"] = ["세마글루타이드", "티르제파타이드"]
        article = NewsArticle.from_dict(row)
        assert article.api_keywords == ["세마글루타이드", "티르제파타이드"]

    def test_comma_separated_keywords(self):
        article = NewsArticle.from_dict(_make_row(api_keywords="암로디핀, 발사르탄,"))
        assert article.api_keywords == ["암로디핀", "발사르탄"]

    def test_unknown_columns_kept_in_extra(self):
        article = NewsArticle.from_dict(_make_row(created_at="2026-02-14T01:00:00Z"))
        assert article.extra == {"created_at": "2026-02-14T01:00:00Z"}
        assert article.to_dict()["created_at"] == "2026-02-14T01:00:00Z"

    def test_none_values_become_empty(self):
        article = NewsArticle.from_dict({"title": "제목", "region": None, "api_keywords": None})
        assert article.region == ""
        assert article.api_keywords == []
        assert not article.is_domestic

    def test_to_dict_round_trip_fields(self):
        row = _make_row()
        assert NewsArticle.from_dict(row).to_dict() == row


# ═══════════════════════════════════════════════════════════
# 정규화 테스트
# ═══════════════════════════════════════════════════════════

class TestNormalize:
    """단일 행 정규화 테스트."""

    def test_clean_html_title(self, normalizer):
        article = normalizer.normalize(_make_row(title="<b>한미약품</b> &amp; 종근당\n 협력"))
        assert article.title == "한미약품 & 종근당 협력"

    def test_clean_html_summary(self, normalizer):
        article = normalizer.normalize(_make_row(summary="<p>원료 &lt;수급&gt; 안정</p>"))
        assert article.summary == "원료 <수급> 안정"

    @pytest.mark.parametrize("raw,expected", [
        ("국내", Region.DOMESTIC),
        ("domestic", Region.DOMESTIC),
        ("KR", Region.DOMESTIC),
        (" Overseas ", Region.OVERSEAS),
        ("해외", Region.OVERSEAS),
    ])
    def test_region_aliases(self, normalizer, raw, expected):
        assert normalizer.normalize(_make_row(region=raw)).region == expected

    def test_unknown_region_kept(self, normalizer):
        assert normalizer.normalize(_make_row(region="리포트")).region == "리포트"

    def test_missing_region_from_registry(self, normalizer):
        row = _make_row(source="Reuters")
        del row["region"]
        assert normalizer.normalize(row).region == Region.OVERSEAS

    def test_missing_region_unknown_source(self, normalizer):
        article = normalizer.normalize(_make_row(region="", source="알 수 없는 매체"))
        assert article.region == ""

    def test_missing_region_without_registry(self):
        article = ArticleNormalizer().normalize(_make_row(region="", source="약업신문"))
        assert article.region == ""

    def test_default_aliases_without_config(self):
        assert ArticleNormalizer().normalize(_make_row(region="overseas")).region == Region.OVERSEAS

    def test_date_iso_datetime(self, normalizer):
        article = normalizer.normalize(_make_row(date="2026-02-14T10:00:00+09:00"))
        assert article.date == "2026-02-14"

    def test_date_rfc822(self, normalizer):
        article = normalizer.normalize(_make_row(date="Sat, 14 Feb 2026 10:00:00 GMT"))
        assert article.date == "2026-02-14"

    def test_unparseable_date_kept(self, normalizer):
        assert normalizer.normalize(_make_row(date="어제")).date == "어제"

    def test_non_dict_row(self, normalizer):
        with pytest.raises(TypeError):
            normalizer.normalize(["title"])


class TestNormalizeBatch:
    """배치 정규화 테스트."""

    def test_batch(self, normalizer):
        rows = [_make_row(id="1"), _make_row(id="2", region="overseas")]
        articles = normalizer.normalize_batch(rows)
        assert [a.id for a in articles] == ["1", "2"]
        assert articles[1].region == Region.OVERSEAS

    def test_skip_invalid_rows(self, normalizer):
        rows = [_make_row(id="1"), "not a row", _make_row(id="3", title="<br/>"), _make_row(id="4")]
        articles = normalizer.normalize_batch(rows)
        assert [a.id for a in articles] == ["1", "4"]

    def test_empty_batch(self, normalizer):
        assert normalizer.normalize_batch([]) == []


class TestConfiguredRegionLabels:
    """regions.domestic/overseas 표기로 region 통일."""

    @pytest.fixture
    def relabeled(self, relabeled_config_dir: str) -> ArticleNormalizer:
        config = ConfigManager(config_dir=relabeled_config_dir)
        return ArticleNormalizer(config, SourceRegistry(config))

    def test_labels_loaded(self, relabeled):
        assert relabeled.labels.domestic == "domestic"
        assert relabeled.labels.overseas == "overseas"

    @pytest.mark.parametrize("raw,expected", [
        ("국내", "domestic"),
        ("KR", "domestic"),
        ("해외", "overseas"),
        ("domestic", "domestic"),
    ])
    def test_aliases_map_to_configured_label(self, relabeled, raw, expected):
        assert relabeled.normalize(_make_row(region=raw)).region == expected

    def test_registry_region_mapped_to_configured_label(self, relabeled):
        row = _make_row(source="데일리팜")
        del row["region"]
        assert relabeled.normalize(row).region == "domestic"

    def test_default_labels_without_config(self):
        assert ArticleNormalizer().labels.domestic == Region.DOMESTIC
