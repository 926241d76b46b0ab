"""Stopword lists for topic extraction.

Closed lists of particles, conjunctions, and news boilerplate that never
make useful topics.
"""

STOPWORDS_KO = frozenset({
    "그리고", "그것", "그러나", "하지만", "또한", "대한", "관련", "지난", "오늘", "내일",
    "지난해", "이번", "지난달", "지난주", "사진", "영상", "기자", "속보", "뉴스", "단독",
    "종합", "한국", "정부", "서울", "중", "등", "때문", "무엇", "어떤", "있다",
    "됐다", "한다", "했다", "부터", "까지", "으로", "에서", "에게", "및", "더",
    "가장", "또", "등등", "등에", "등을", "등이", "등으로",
})

STOPWORDS_EN = frozenset({
    "the", "and", "for", "with", "that", "this", "from", "will", "have", "has",
    "are", "were", "was", "been", "its", "over", "after", "amid", "into", "about",
    "says", "say", "said", "new", "more", "than", "as", "on", "in", "of",
    "to", "by", "at", "it", "is", "a", "an", "up", "out",
})

STOPWORDS = STOPWORDS_KO | STOPWORDS_EN
