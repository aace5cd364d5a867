"""
Tests for text_summarizer.summarize

Covers:
  - identity when the document is already short enough
  - centrality-based selection, tie-break and document order
  - invalid sentence counts and the clamp option
  - ratio based summaries
  - the bundled sample document
"""

from __future__ import annotations

import logging

import pytest

from text_summarizer.preprocessing import preprocess_text, split_sentences
from text_summarizer.sample import SAMPLE_TEXT
from text_summarizer.summarize import (
    InvalidArgumentError,
    SummarizerConfig,
    generate_summary,
    sentence_count_for_ratio,
    summarize,
    summarize_by_ratio,
)

# apple/banana/cherry sentences each share one term with two others, so they
# tie on centrality; dog and eel share nothing
TIED = "Apple banana. Apple cherry. Banana cherry. Dog. Eel."
HUB = "Apple banana cherry. Apple. Banana. Cherry. Dog."


# ---------------------------------------------------------------------------
# Identity / early exit
# ---------------------------------------------------------------------------

class TestEarlyExit:

    def test_empty_input(self):
        assert summarize("", 3) == ""

    def test_k_equal_to_sentence_count_returns_input_verbatim(self):
        text = "  One.   Two!\n\n"
        assert summarize(text, 2) == text

    def test_k_larger_than_sentence_count(self):
        assert summarize(TIED, 10) == TIED

    def test_single_sentence(self):
        assert summarize("Just one sentence without an end", 1) == "Just one sentence without an end"


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestSelection:

    def test_most_central_sentence_wins(self):
        assert summarize(HUB, 1) == "Apple banana cherry."

    def test_ties_resolved_by_document_position(self):
        assert summarize(TIED, 1) == "Apple banana."
        assert summarize(TIED, 2) == "Apple banana. Apple cherry."

    def test_output_in_document_order(self):
        result = summarize(TIED, 3)
        assert result == "Apple banana. Apple cherry. Banana cherry."

    def test_output_is_subsequence_of_sentences(self):
        sentences = split_sentences(HUB)
        picked = split_sentences(summarize(HUB, 3))
        assert len(picked) == 3
        positions = [sentences.index(s) for s in picked]
        assert positions == sorted(positions)

    def test_no_trailing_whitespace(self):
        result = summarize("Alpha beta.   Alpha gamma.  \n Delta alpha!  ", 2)
        assert result == result.rstrip()

    def test_generate_summary_uses_given_scores(self):
        doc = preprocess_text(TIED)
        assert generate_summary(doc, [0.0, 0.0, 0.0, 0.2, 0.1], 2) == "Dog. Eel."

    def test_all_zero_vectors_do_not_fail(self):
        # N=2 and df=1 gives idf ln(2/2) = 0 for every token
        assert summarize("Alpha. Beta.", 1) == "Alpha."

    def test_ubiquitous_tokens_negative_idf(self):
        text = "same words. same words. same words."
        assert summarize(text, 1) == "same words."


# ---------------------------------------------------------------------------
# Invalid arguments
# ---------------------------------------------------------------------------

class TestInvalidArguments:

    @pytest.mark.parametrize("k", [0, -3])
    def test_non_positive_count_rejected(self, k):
        with pytest.raises(InvalidArgumentError):
            summarize(TIED, k)

    @pytest.mark.parametrize("k", [1.5, "2", None, True])
    def test_non_int_count_rejected(self, k):
        with pytest.raises(InvalidArgumentError):
            summarize(TIED, k)

    def test_error_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)

    def test_clamp_option(self, caplog):
        cfg = SummarizerConfig(clamp_sentence_count=True)
        with caplog.at_level(logging.WARNING, logger="text_summarizer.summarize"):
            assert summarize(TIED, 0, cfg=cfg) == summarize(TIED, 1)
        assert "clamped" in caplog.text

    def test_clamp_similarity_option_runs(self):
        cfg = SummarizerConfig(clamp_similarity=True)
        assert summarize(HUB, 1, cfg=cfg) == "Apple banana cherry."


# ---------------------------------------------------------------------------
# Compression ratio
# ---------------------------------------------------------------------------

class TestRatio:

    @pytest.mark.parametrize(
        "n, ratio, expected",
        [(5, 0.2, 1), (10, 0.3, 3), (3, 0.1, 1), (4, 1.0, 4)],
    )
    def test_sentence_count_for_ratio(self, n, ratio, expected):
        assert sentence_count_for_ratio(n, ratio) == expected

    @pytest.mark.parametrize("ratio", [0.0, -0.5, 1.5])
    def test_ratio_out_of_range(self, ratio):
        with pytest.raises(InvalidArgumentError):
            sentence_count_for_ratio(5, ratio)

    def test_summarize_by_ratio(self):
        assert summarize_by_ratio(TIED, 0.4) == "Apple banana. Apple cherry."


# ---------------------------------------------------------------------------
# Sample document
# ---------------------------------------------------------------------------

class TestSampleDocument:

    def test_two_sentence_summary(self):
        sentences = split_sentences(SAMPLE_TEXT)
        assert len(sentences) == 5

        result = summarize(SAMPLE_TEXT, 2)
        picked = split_sentences(result)
        assert len(picked) == 2
        assert all(s in sentences for s in picked)
        assert sentences.index(picked[0]) < sentences.index(picked[1])
        assert result == " ".join(picked)
        assert not result.endswith(" ")
