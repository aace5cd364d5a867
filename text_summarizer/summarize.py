from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional
from .datatypes import Document
from .preprocessing import preprocess_text
from .features import similarity_matrix
from .scoring import centrality_scores, select_top_k

logger = logging.getLogger(__name__)

class InvalidArgumentError(ValueError):
    """Raised for a sentence count or compression ratio the summarizer cannot honor."""

@dataclass
class SummarizerConfig:
    clamp_sentence_count: bool = False  # raise counts below 1 to 1 instead of failing
    clamp_similarity: bool = False      # floor negative cosine similarities at 0

def _resolve_sentence_count(sentence_count: int, cfg: SummarizerConfig) -> int:
    # bool is an int subclass but never a meaningful count
    if not isinstance(sentence_count, int) or isinstance(sentence_count, bool):
        raise InvalidArgumentError(f"sentence_count must be an int, got {type(sentence_count).__name__}")
    if sentence_count < 1:
        if not cfg.clamp_sentence_count:
            raise InvalidArgumentError(f"sentence_count must be >= 1, got {sentence_count}")
        logger.warning("sentence_count %d clamped to 1", sentence_count)
        return 1
    return sentence_count

def sentence_count_for_ratio(n: int, compression_ratio: float) -> int:
    if not 0.0 < compression_ratio <= 1.0:
        raise InvalidArgumentError(f"compression_ratio must be in (0, 1], got {compression_ratio}")
    return max(1, int(round(n * compression_ratio)))

def generate_summary(doc: Document, scores: List[float], k: int) -> str:
    selected = select_top_k(scores, k)
    logger.debug("selected sentences %s", selected)
    return " ".join(doc.sentences[i].text for i in selected).rstrip()

def summarize(text: str, sentence_count: int, cfg: Optional[SummarizerConfig] = None) -> str:
    """
    Extractive summary made of the ``sentence_count`` most central sentences.

    Centrality is the mean TF-IDF cosine similarity of a sentence to all the
    others. Chosen sentences are joined with single spaces in document order.
    If the text has no more sentences than requested it is returned verbatim.

    Raises:
        InvalidArgumentError: sentence_count is not a positive int and
            ``cfg.clamp_sentence_count`` is off.
    """
    cfg = cfg or SummarizerConfig()
    k = _resolve_sentence_count(sentence_count, cfg)

    doc = preprocess_text(text)
    if len(doc.sentences) <= k:
        return text

    simM = similarity_matrix([s.tf_idf_vector for s in doc.sentences], clamp=cfg.clamp_similarity)
    scores = centrality_scores(simM)
    return generate_summary(doc, scores, k)

def summarize_by_ratio(text: str, compression_ratio: float = 0.2, cfg: Optional[SummarizerConfig] = None) -> str:
    # Pipeline glue: k derived from the share of sentences to keep
    doc = preprocess_text(text)
    k = sentence_count_for_ratio(len(doc.sentences), compression_ratio)
    return summarize(text, k, cfg=cfg)
