# discipline/ranker.py
#
# Two lexical passage-ranking strategies over the handbook text:
#   rank_passages          token overlap (unigrams, bigrams, distinct coverage)
#   rank_passages_focused  substring containment biased by category keywords
# They score differently and back different endpoints, so both are kept.

import re
from typing import List, Sequence

from .models import ScoredPassage
from .text import bigrams, tokenize

DEFAULT_MAX_PASSAGES = 3
DEFAULT_MIN_PASSAGE_LENGTH = 40

BIGRAM_WEIGHT = 2
QUESTION_TOKEN_WEIGHT = 2
FOCUS_KEYWORD_WEIGHT = 1

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n+")


def split_passages(document: str, min_length: int = DEFAULT_MIN_PASSAGE_LENGTH) -> List[str]:
    """Paragraphs of ``document``; short ones (headers, page numbers) are dropped."""
    if not document:
        return []
    paragraphs = (p.strip() for p in _PARAGRAPH_BREAK.split(document))
    return [p for p in paragraphs if p and len(p) >= min_length]


def _top(scored: List[ScoredPassage], max_passages: int) -> List[ScoredPassage]:
    # sorted() is stable, so equal scores stay in document order.
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return [s for s in ranked[:max(max_passages, 0)] if s.score > 0]


def score_passages(
    question: str,
    document: str,
    focus_keywords: Sequence[str] = (),
    max_passages: int = DEFAULT_MAX_PASSAGES,
    min_passage_length: int = DEFAULT_MIN_PASSAGE_LENGTH,
) -> List[ScoredPassage]:
    if not question or not document:
        return []

    candidates = _focus_filter(split_passages(document, min_passage_length), focus_keywords)

    q_tokens = tokenize(question, drop_stopwords=True)
    q_unigrams = set(q_tokens)
    q_bigrams = set(bigrams(q_tokens))

    scored: List[ScoredPassage] = []
    for idx, passage in enumerate(candidates):
        p_tokens = tokenize(passage)
        unigram_score = sum(1 for t in p_tokens if t in q_unigrams)
        bigram_score = BIGRAM_WEIGHT * sum(1 for bg in bigrams(p_tokens) if bg in q_bigrams)
        distinct_overlap = len(q_unigrams.intersection(p_tokens))
        scored.append(
            ScoredPassage(passage, unigram_score + bigram_score + distinct_overlap, idx)
        )
    return _top(scored, max_passages)


def rank_passages(
    question: str,
    document: str,
    focus_keywords: Sequence[str] = (),
    max_passages: int = DEFAULT_MAX_PASSAGES,
    min_passage_length: int = DEFAULT_MIN_PASSAGE_LENGTH,
) -> List[str]:
    return [
        s.text
        for s in score_passages(question, document, focus_keywords, max_passages, min_passage_length)
    ]


def score_passages_focused(
    question: str,
    document: str,
    focus_keywords: Sequence[str] = (),
    max_passages: int = DEFAULT_MAX_PASSAGES,
    min_passage_length: int = DEFAULT_MIN_PASSAGE_LENGTH,
) -> List[ScoredPassage]:
    """Substring scorer: +2 for each question token found anywhere in the
    passage and +1 for each focus keyword it contains."""
    if not question or not document:
        return []

    lowered_focus = [str(k).lower() for k in focus_keywords if k]
    candidates = _focus_filter(split_passages(document, min_passage_length), lowered_focus)
    q_tokens = tokenize(question)

    scored: List[ScoredPassage] = []
    for idx, passage in enumerate(candidates):
        lowered = passage.lower()
        score = QUESTION_TOKEN_WEIGHT * sum(1 for t in q_tokens if t in lowered)
        score += FOCUS_KEYWORD_WEIGHT * sum(1 for k in lowered_focus if k in lowered)
        scored.append(ScoredPassage(passage, score, idx))
    return _top(scored, max_passages)


def rank_passages_focused(
    question: str,
    document: str,
    focus_keywords: Sequence[str] = (),
    max_passages: int = DEFAULT_MAX_PASSAGES,
    min_passage_length: int = DEFAULT_MIN_PASSAGE_LENGTH,
) -> List[str]:
    return [
        s.text
        for s in score_passages_focused(
            question, document, focus_keywords, max_passages, min_passage_length
        )
    ]


def _focus_filter(passages: List[str], focus_keywords: Sequence[str]) -> List[str]:
    keywords = [str(k).lower() for k in focus_keywords if k]
    if not keywords:
        return passages
    focused = [p for p in passages if any(k in p.lower() for k in keywords)]
    # Keywords only narrow the pool; they never empty it on their own.
    return focused or passages
