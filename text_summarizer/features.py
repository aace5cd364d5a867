from __future__ import annotations
from typing import Dict, List, Sequence
from collections import Counter
import math
from .datatypes import SparseVector

def term_frequency(tokens: Sequence[str]) -> Dict[str, int]:
    """Raw occurrence count of each token within one sentence."""
    return dict(Counter(tokens))


def document_frequency(token_lists: Sequence[Sequence[str]]) -> Dict[str, int]:
    """Number of sentences each token appears in (once per sentence, not per occurrence)."""
    df: Counter = Counter()
    for tokens in token_lists:
        df.update(set(tokens))
    return dict(df)


def inverse_document_frequency(token_lists: Sequence[Sequence[str]]) -> Dict[str, float]:
    """
    IDF(t) = ln(N / (1 + DF(t))), where every sentence counts as one 'document'.

    A token present in all N sentences gets ln(N / (N + 1)) < 0; that negative
    weight is kept. Tokens never seen have no entry, callers read them as 0.
    """
    N = len(token_lists)
    return {
        term: math.log(N / (1.0 + DF))
        for term, DF in document_frequency(token_lists).items()
        if DF > 0
    }


def tfidf_vector(tf: Dict[str, int], idf_scores: Dict[str, float]) -> SparseVector:
    """TF-IDF(t,d) = TF(t,d) * IDF(t), no normalization"""
    return {t: tf[t] * idf_scores.get(t, 0.0) for t in tf}


def _norm(v: SparseVector) -> float:
    return math.sqrt(sum(w * w for w in v.values()))


def cosine_similarity(v1: SparseVector, v2: SparseVector) -> float:
    # keys missing from v2 contribute 0, so walking v1 is enough
    dot = sum(w * v2.get(t, 0.0) for t, w in v1.items())
    n1 = _norm(v1)
    n2 = _norm(v2)
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    return dot / (n1 * n2)


def similarity_matrix(vectors: List[SparseVector], clamp: bool = False) -> List[List[float]]:
    """
    Pairwise cosine similarity between sentence vectors, diagonal left at 0.

    With clamp=True negative similarities are floored at 0.
    """
    n = len(vectors)
    M = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            sim = cosine_similarity(vectors[i], vectors[j])
            M[i][j] = max(sim, 0.0) if clamp else sim
    return M
