# discipline/models.py

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Category(str, Enum):
    VIOLATIONS = "violations"
    ATTENDANCE = "attendance"
    DRESS_CODE = "dressCode"
    MINOR_OFFENSES = "minorOffenses"
    MAJOR_OFFENSES_A = "majorOffensesA"
    MAJOR_OFFENSES_B = "majorOffensesB"
    CATEGORY_C = "categoryC"
    BULLYING = "bullying"
    APPEALS = "appeals"
    SUSPENSION = "suspension"
    EXPULSION = "expulsion"
    GENERAL = "general"


@dataclass(frozen=True)
class FAQRule:
    pattern: "re.Pattern[str]"
    answer: str

    def matches(self, question: str) -> bool:
        return self.pattern.search(question) is not None


@dataclass(frozen=True)
class CategoryProfile:
    category: Category
    title: str
    faqs: Tuple[FAQRule, ...] = ()
    keywords: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoredPassage:
    text: str
    score: int
    index: int  # position among the candidate paragraphs


SOURCE_FAQ = "FAQ"
SOURCE_HANDBOOK = "Student Handbook"


@dataclass
class ChatResponse:
    text: str
    category: Category
    suggestions: List[str] = field(default_factory=list)
    source: str = SOURCE_HANDBOOK
    passages: Optional[List[str]] = None  # focused retrieval result, kept even when the FAQ wins

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "suggestions": list(self.suggestions),
            "category": self.category.value,
            "source": self.source,
        }
