from pharma_news.dedup.dedup_engine import (
    DedupResult,
    DeduplicationEngine,
    DuplicateMatch,
    deduplicate_news,
)
from pharma_news.dedup.title_similarity import (
    SimilarityThresholds,
    are_similar,
    extract_core_words,
    has_consecutive_overlap,
    normalize_title,
)

__all__ = [
    "DedupResult",
    "DeduplicationEngine",
    "DuplicateMatch",
    "deduplicate_news",
    "SimilarityThresholds",
    "are_similar",
    "extract_core_words",
    "has_consecutive_overlap",
    "normalize_title",
]
