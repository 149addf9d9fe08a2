"""국내 기사 중복 제거 CLI"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from pharma_news.dedup.dedup_engine import DeduplicationEngine
from pharma_news.normalizer.article_normalizer import ArticleNormalizer
from pharma_news.registry.source_registry import SourceRegistry
from pharma_news.stats.region_stats import count_by_region
from pharma_news.utils.config_manager import ConfigManager
from pharma_news.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# --input 미지정 시 사용하는 데모 배치
DEMO_ROWS: List[Dict[str, Any]] = [
    {"id": "1", "title": "한미약품 당뇨병 치료제 국산화 성공", "source": "약업신문", "region": "국내", "date": "2026-02-14"},
    {"id": "2", "title": "[단독] 한미약품 당뇨병 치료제 FDA 승인", "source": "팜뉴스", "region": "국내", "date": "2026-02-14"},
    {"id": "3", "title": "Lilly GLP-1 obesity drug succeeds in phase 3", "source": "Reuters", "region": "해외", "date": "2026-02-14"},
    {"id": "4", "title": "Lilly GLP-1 obesity drug succeeds in phase 3", "source": "FiercePharma", "region": "해외", "date": "2026-02-14"},
    {"id": "5", "title": "식약처, 메트포르민 수입경고 발표", "source": "데일리팜", "date": "2026-02-13"},
    {"id": "6", "title": "식약처, 메트포르민 수입경고 발표 (종합)", "source": "약업신문", "date": "2026-02-13"},
    {"id": "7", "title": "삼성바이오에피스, 바이오시밀러 원료 자체 생산 확대", "source": "약업신문", "region": "국내", "date": "2026-02-12"},
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="국내 제약 뉴스 근접 중복 제거")
    parser.add_argument("--input", help="기사 행 JSON 배열 파일 (미지정 시 데모 배치)")
    parser.add_argument("--output", help="결과 JSON 파일 (미지정 시 stdout)")
    parser.add_argument("--config-dir", help="설정 디렉토리 (기본: 패키지 config)")
    parser.add_argument("--report", action="store_true", help="제외된 기사와 매칭 기사 로그 출력")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="로그 레벨 (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def load_rows(path: str) -> List[Dict[str, Any]]:
    """JSON 파일에서 기사 행 배열 로드."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("입력 JSON 최상위는 배열이어야 합니다")
    return data


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    config = ConfigManager(config_dir=args.config_dir)
    registry = SourceRegistry(config)
    normalizer = ArticleNormalizer(config, registry)
    engine = DeduplicationEngine.from_config(config)

    if args.input:
        try:
            rows = load_rows(args.input)
        except (OSError, ValueError) as e:
            logger.error("입력 파일을 읽을 수 없습니다: %s - %s", args.input, e)
            return 1
    else:
        rows = DEMO_ROWS

    articles = normalizer.normalize_batch(rows)
    result = engine.deduplicate_with_report(articles)

    if args.report:
        for match in result.removed:
            logger.info("제외: %s (기존: %s)", match.dropped.title, match.matched.title)
    logger.info("지역별 기사 수: %s", count_by_region(result.kept, normalizer.labels))

    payload = json.dumps(
        [article.to_dict() for article in result.kept], ensure_ascii=False, indent=2
    )
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        logger.info("결과 저장: %s (%d건)", args.output, len(result.kept))
    else:
        sys.stdout.write(payload + "\n")
    return 0
