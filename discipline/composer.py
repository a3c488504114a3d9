# discipline/composer.py

import logging
from typing import Mapping

from .catalog import CATALOG, focus_keywords, suggestions_for
from .classifier import classify
from .faq import resolve_faq
from .models import SOURCE_FAQ, SOURCE_HANDBOOK, Category, CategoryProfile, ChatResponse
from .ranker import rank_passages, rank_passages_focused

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No directly relevant section found in the handbook for that question."

CHATBOT_MAX_PASSAGES = 2
HANDBOOK_MAX_PASSAGES = 3
PASSAGE_SEPARATOR = "\n\n"


def answer_question(
    question: str,
    document: str,
    catalog: Mapping[Category, CategoryProfile] = CATALOG,
) -> ChatResponse:
    """Classify, try the category FAQ, then fall back to focused handbook passages."""
    category = classify(question)
    faq_answer = resolve_faq(category, question, catalog)

    # Retrieval runs even when the FAQ answers so the passages stay available
    # on the response.
    passages = rank_passages_focused(
        question,
        document,
        focus_keywords(category, catalog),
        max_passages=CHATBOT_MAX_PASSAGES,
    )
    handbook_text = PASSAGE_SEPARATOR.join(passages)

    logger.info(
        "Chatbot question classified as %s (faq=%s, passages=%d)",
        category.value,
        faq_answer is not None,
        len(passages),
    )
    return ChatResponse(
        text=faq_answer or handbook_text or NOT_FOUND_MESSAGE,
        category=category,
        suggestions=suggestions_for(category, catalog),
        source=SOURCE_FAQ if faq_answer else SOURCE_HANDBOOK,
        passages=passages,
    )


def answer_from_handbook(question: str, document: str) -> str:
    passages = rank_passages(question, document, max_passages=HANDBOOK_MAX_PASSAGES)
    logger.info("Handbook search returned %d passage(s)", len(passages))
    if not passages:
        return NOT_FOUND_MESSAGE
    return PASSAGE_SEPARATOR.join(passages)
