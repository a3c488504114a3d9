# discipline/text.py

import re
from typing import FrozenSet, List, Sequence

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")

STOPWORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "if", "then", "else", "for", "to",
    "of", "in", "on", "at", "by", "with", "from", "as", "is", "are", "was",
    "were", "be", "being", "been", "this", "that", "these", "those", "it",
    "its", "do", "does", "did", "can", "could", "should", "would", "may",
    "might", "will", "shall", "your", "you", "we", "our", "they", "their",
})


def normalize(text: str) -> str:
    if not text:
        return ""
    lowered = _NON_ALNUM.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()


def tokenize(text: str, drop_stopwords: bool = False) -> List[str]:
    """Split normalized text into tokens.

    Questions are tokenized with ``drop_stopwords=True``; passages keep every
    token so phrase matches against the handbook stay intact.
    """
    tokens = [t for t in normalize(text).split(" ") if t]
    if drop_stopwords:
        tokens = [t for t in tokens if t not in STOPWORDS]
    return tokens


def bigrams(tokens: Sequence[str]) -> List[str]:
    return [f"{tokens[i]} {tokens[i + 1]}" for i in range(len(tokens) - 1)]
