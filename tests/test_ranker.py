"""Tests for the two passage-ranking strategies."""

from discipline.ranker import (
    rank_passages,
    rank_passages_focused,
    score_passages,
    score_passages_focused,
    split_passages,
)

from .conftest import (
    APPEAL_PARAGRAPH,
    ATTENDANCE_PARAGRAPH,
    BULLYING_PARAGRAPH,
    HANDBOOK_TEXT,
    UNIFORM_PARAGRAPH,
)


class TestSplitPassages:
    def test_drops_short_paragraphs(self):
        assert split_passages(HANDBOOK_TEXT) == [
            UNIFORM_PARAGRAPH,
            ATTENDANCE_PARAGRAPH,
            BULLYING_PARAGRAPH,
            APPEAL_PARAGRAPH,
        ]

    def test_custom_minimum_length(self):
        passages = split_passages(HANDBOOK_TEXT, min_length=5)
        assert passages[:2] == ["STUDENT HANDBOOK", "Page 1"]

    def test_empty_document(self):
        assert split_passages("") == []


class TestRankPassages:
    def test_empty_document_returns_nothing(self):
        assert rank_passages("dress code", "", [], 3, 40) == []

    def test_empty_question_returns_nothing(self):
        assert rank_passages("", HANDBOOK_TEXT) == []

    def test_finds_relevant_paragraph(self):
        assert rank_passages("How do I appeal a decision?", HANDBOOK_TEXT) == [APPEAL_PARAGRAPH]

    def test_no_overlap_returns_empty(self):
        assert rank_passages("xyzzy quux", HANDBOOK_TEXT) == []

    def test_short_paragraphs_are_never_returned(self):
        assert rank_passages("student handbook", HANDBOOK_TEXT) == []
        assert rank_passages("student handbook", HANDBOOK_TEXT, min_passage_length=5) == [
            "STUDENT HANDBOOK"
        ]

    def test_bigram_outscores_reversed_words(self):
        reversed_pair = "Every student must wear the uniform school on regular class days each week."
        exact_pair = "Every student must wear the school uniform on regular class days each week."
        document = reversed_pair + "\n\n" + exact_pair

        scored = score_passages("school uniform", document)

        assert [s.text for s in scored] == [exact_pair, reversed_pair]
        assert scored[0].score == 6  # 2 unigrams + 2 for the bigram + 2 distinct
        assert scored[1].score == 4

    def test_repeated_tokens_count_each_occurrence(self):
        repeated = "The uniform policy covers the uniform worn on class days and the uniform for PE."
        single = "The uniform policy applies to every student enrolled in the senior high school."
        scored = score_passages("uniform", single + "\n\n" + repeated)
        assert [(s.text, s.score) for s in scored] == [(repeated, 4), (single, 2)]

    def test_ties_keep_document_order(self):
        first = "Rule one: the library closes at five in the afternoon daily."
        second = "Rule two: the library opens at seven in the morning daily."
        assert rank_passages("library", first + "\n\n" + second) == [first, second]

    def test_results_are_bounded_positive_and_sorted(self):
        for max_passages in (0, 1, 2, 3, 10):
            scored = score_passages("students decisions uniform bullying", HANDBOOK_TEXT,
                                    max_passages=max_passages)
            assert len(scored) <= max_passages
            assert all(s.score > 0 for s in scored)
            scores = [s.score for s in scored]
            assert scores == sorted(scores, reverse=True)

    def test_focus_keywords_narrow_candidates(self):
        assert rank_passages("students", HANDBOOK_TEXT)[0] == UNIFORM_PARAGRAPH
        assert rank_passages("students", HANDBOOK_TEXT, ["appeal"]) == [APPEAL_PARAGRAPH]

    def test_unmatched_focus_keywords_fall_back_to_all_paragraphs(self):
        unfocused = rank_passages("How do I appeal a decision?", HANDBOOK_TEXT)
        focused = rank_passages("How do I appeal a decision?", HANDBOOK_TEXT, ["zeppelin"])
        assert unfocused
        assert focused == unfocused


class TestRankPassagesFocused:
    def test_empty_inputs(self):
        assert rank_passages_focused("uniform", "") == []
        assert rank_passages_focused("", HANDBOOK_TEXT, ["uniform"]) == []

    def test_scores_question_tokens_and_focus_keywords(self):
        scored = score_passages_focused("uniform policy", HANDBOOK_TEXT, ["uniform"])
        assert [(s.text, s.score) for s in scored] == [(UNIFORM_PARAGRAPH, 3)]

    def test_matches_substrings_unlike_token_ranker(self):
        assert rank_passages("bully", HANDBOOK_TEXT) == []
        assert rank_passages_focused("bully", HANDBOOK_TEXT) == [BULLYING_PARAGRAPH]

    def test_unmatched_focus_keywords_fall_back_to_all_paragraphs(self):
        result = rank_passages_focused("appeal", HANDBOOK_TEXT, ["zeppelin"])
        assert result == [APPEAL_PARAGRAPH]

    def test_respects_max_passages(self):
        result = rank_passages_focused("students", HANDBOOK_TEXT, max_passages=1)
        assert result == [UNIFORM_PARAGRAPH]

    def test_no_overlap_returns_empty(self):
        assert rank_passages_focused("xyzzy quux", HANDBOOK_TEXT, ["zeppelin"]) == []
