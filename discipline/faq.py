# discipline/faq.py

import logging
from typing import Mapping, Optional

from .catalog import CATALOG
from .models import Category, CategoryProfile

logger = logging.getLogger(__name__)


def resolve_faq(
    category: Category,
    question: str,
    catalog: Mapping[Category, CategoryProfile] = CATALOG,
) -> Optional[str]:
    """Return the canned answer of the first rule matching ``question``.

    Categories without a rule table (``general``) resolve to None. Registered
    categories always end with a match-everything rule, so they never do.
    """
    profile = catalog.get(category)
    if profile is None:
        return None
    text = question or ""
    for position, rule in enumerate(profile.faqs):
        if rule.matches(text):
            logger.debug("FAQ rule %d matched for %s", position, category.value)
            return rule.answer
    return None
