# discipline/classifier.py

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from .models import Category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifierRule:
    pattern: "re.Pattern[str]"
    category: Category


def _rule(expr: str, category: Category) -> ClassifierRule:
    return ClassifierRule(re.compile(expr), category)


# First match wins. Several categories share vocabulary ("category b" is also a
# "violation"), so the narrower topics come first.
CLASSIFIER_RULES: Tuple[ClassifierRule, ...] = (
    _rule(r"dress|uniform|groom|hair|attire", Category.DRESS_CODE),
    _rule(r"attend|absen|tardy|\blate", Category.ATTENDANCE),
    _rule(r"appeal|challenge|dispute|contest", Category.APPEALS),
    _rule(r"bully", Category.BULLYING),
    _rule(r"suspend", Category.SUSPENSION),
    _rule(r"expel|expulsion|dismiss", Category.EXPULSION),
    _rule(r"category\s*c", Category.CATEGORY_C),
    _rule(r"category\s*b|cheat|plagiar|gambl|alcohol|vandal", Category.MAJOR_OFFENSES_B),
    _rule(r"category\s*a|disrespect|fight|pda|cutting|record", Category.MAJOR_OFFENSES_A),
    _rule(r"minor|id\s*violation|tardi|loiter|litter", Category.MINOR_OFFENSES),
    _rule(r"violation|offense|rule", Category.VIOLATIONS),
)


def classify(question: str) -> Category:
    text = (question or "").lower()
    for rule in CLASSIFIER_RULES:
        if rule.pattern.search(text):
            logger.debug("Classified question as %s", rule.category.value)
            return rule.category
    return Category.GENERAL
