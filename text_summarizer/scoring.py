from __future__ import annotations
from typing import List

def centrality_scores(simM: List[List[float]]) -> List[float]:
    """
    Mean cosine similarity of each sentence to every other sentence.

    Args:
        simM: square similarity matrix, diagonal ignored

    Returns:
        One score per sentence. With fewer than two sentences there are no
        pairs to average, so every score is 0.
    """
    n = len(simM)
    if n < 2:
        return [0.0] * n
    return [sum(simM[i][j] for j in range(n) if j != i) / (n - 1) for i in range(n)]

def rank_sentences(scores: List[float]) -> List[int]:
    # highest score first; exact ties keep the earlier sentence ahead
    return sorted(range(len(scores)), key=lambda i: (-scores[i], i))

def select_top_k(scores: List[float], k: int) -> List[int]:
    selected = rank_sentences(scores)[:max(0, k)]
    selected.sort()  # restore original order
    return selected
