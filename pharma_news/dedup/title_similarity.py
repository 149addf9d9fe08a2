"""국내 기사 제목 유사도 판정 (정규화, 핵심 단어 추출, 연속 일치, 단어 중첩)"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

# 공백 + 서양/동아시아 따옴표·괄호, 구두점, 하이픈/대시, 가운뎃점
TITLE_PUNCTUATION_RE = re.compile(r"[\s\-–—·:;,.'\"“”‘’「」『』【】\[\]()（）]")

# 제목 맨 앞에 붙는 편집 말머리
EDITORIAL_PREFIXES = ("속보", "단독", "종합", "업데이트", "긴급")
_PREFIX_RE = re.compile(r"^(?:" + "|".join(EDITORIAL_PREFIXES) + ")")

# 한글 음절(U+AC00–U+D7A3) 2자 이상 연속
CORE_WORD_RE = re.compile(r"[가-힣]{2,}")

STOPWORDS = frozenset({
    "에서", "에게", "으로", "부터", "까지", "에는", "에도", "이다", "이며", "하는",
    "하고", "한다", "위한", "대한", "관련", "통해", "따른", "있는", "없는", "해당",
})


@dataclass(frozen=True)
class SimilarityThresholds:
    """
    제목 중복 판정 임계값.

    기본값은 실제 기사 배치에서 튜닝된 값이므로 제품 판단 없이 바꾸지 않는다.
    """

    # 포함 관계 판정: len(짧은 제목) / len(긴 제목) > containment_ratio
    containment_ratio: float = 0.6
    # 연속으로 일치해야 하는 핵심 단어 수
    consecutive_words: int = 3
    # 단어 중첩 비율을 계산하기 위한 최소 핵심 단어 수
    min_core_words: int = 2
    # 단어 중첩 비율 판정: overlap / max(len_a, len_b) >= overlap_ratio
    overlap_ratio: float = 0.7

    def __post_init__(self) -> None:
        for name in ("containment_ratio", "overlap_ratio"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name}는 (0, 1] 범위여야 합니다: {value}")
        for name in ("consecutive_words", "min_core_words"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name}는 1 이상이어야 합니다: {value}")


DEFAULT_THRESHOLDS = SimilarityThresholds()


def normalize_title(title: Optional[str]) -> str:
    """공백/구두점과 맨 앞 말머리(속보, 단독 등)를 제거하고 소문자로 변환."""
    if not title:
        return ""
    text = TITLE_PUNCTUATION_RE.sub("", title)
    text = _PREFIX_RE.sub("", text, count=1)
    return text.lower()


def extract_core_words(title: Optional[str]) -> List[str]:
    """
    제목에서 핵심 단어(2음절 이상 한글 토큰) 추출.

    정규화 전 원문 제목을 받는다. 불용어는 제외하며, 한글이 아닌 텍스트는
    토큰을 만들지 않는다.

    Args:
        title: 원문 제목.

    Returns:
        등장 순서대로 정렬된 핵심 단어 리스트.
    """
    if not title:
        return []
    return [word for word in CORE_WORD_RE.findall(title) if word not in STOPWORDS]


def has_consecutive_overlap(
    words_a: Sequence[str], words_b: Sequence[str], min_len: int = 3
) -> bool:
    """words_a의 연속 min_len 단어가 같은 순서로 words_b 어딘가에 연속해 나타나는지."""
    if len(words_a) < min_len or len(words_b) < min_len:
        return False

    for i in range(len(words_a) - min_len + 1):
        window = list(words_a[i:i + min_len])
        for j in range(len(words_b) - min_len + 1):
            if list(words_b[j:j + min_len]) == window:
                return True
    return False


def word_overlap_ratio(words_a: Sequence[str], words_b: Sequence[str]) -> float:
    """words_a 중 words_b에 존재하는 단어 수 / 두 리스트 중 긴 쪽 길이."""
    longest = max(len(words_a), len(words_b))
    if longest == 0:
        return 0.0
    set_b = set(words_b)
    overlap = sum(1 for word in words_a if word in set_b)
    return overlap / longest


def are_similar(
    a: Optional[str],
    b: Optional[str],
    thresholds: Optional[SimilarityThresholds] = None,
) -> bool:
    """
    두 제목이 같은 뉴스를 다루는 중복 기사인지 판정.

    순서대로 평가하며 처음 참이 되는 조건에서 중단한다.

    1. 정규화 제목 완전 일치
    2. 긴 제목이 짧은 제목을 포함하고 길이 비율이 containment_ratio 초과
    3. 핵심 단어 consecutive_words개 연속 일치
    4. 어느 한쪽 핵심 단어가 min_core_words 미만이면 중복 아님
    5. 핵심 단어 중첩 비율이 overlap_ratio 이상

    정규화 결과가 빈 제목은 어떤 제목과도 중복으로 보지 않는다.
    """
    t = thresholds or DEFAULT_THRESHOLDS

    norm_a = normalize_title(a)
    norm_b = normalize_title(b)
    if not norm_a or not norm_b:
        return False

    if norm_a == norm_b:
        return True

    if len(norm_a) < len(norm_b):
        shorter, longer = norm_a, norm_b
    else:
        shorter, longer = norm_b, norm_a
    if shorter in longer and len(shorter) / len(longer) > t.containment_ratio:
        return True

    words_a = extract_core_words(a)
    words_b = extract_core_words(b)

    if has_consecutive_overlap(words_a, words_b, t.consecutive_words):
        return True

    if len(words_a) < t.min_core_words or len(words_b) < t.min_core_words:
        return False

    return word_overlap_ratio(words_a, words_b) >= t.overlap_ratio
