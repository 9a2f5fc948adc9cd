from __future__ import annotations
import math
import logging
from typing import Dict, List, Sequence
from .datatypes import Sentence, SimilarityMatrix

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.1

def cosine_similarity(v1: Dict[str, int], v2: Dict[str, int]) -> float:
    """Cosine similarity for sparse vectors (dict term -> count)"""
    if not v1 or not v2:
        return 0.0
    common = set(v1) & set(v2)
    if not common:
        return 0.0
    dot = sum(v1[t] * v2[t] for t in common)
    n1 = math.sqrt(sum(c*c for c in v1.values()))
    n2 = math.sqrt(sum(c*c for c in v2.values()))
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    return dot / (n1 * n2)

def build_similarity(sentences: Sequence[Sentence], threshold: float = DEFAULT_THRESHOLD) -> SimilarityMatrix:
    """
    Symmetric N x N cosine matrix over sentence frequency maps.
    Diagonal stays 0; values below `threshold` are zeroed.
    """
    n = len(sentences)
    M: List[List[float]] = [[0.0]*n for _ in range(n)]
    edges = 0
    for i in range(n):
        for j in range(i+1, n):
            sim = cosine_similarity(sentences[i].freq_map, sentences[j].freq_map)
            if sim < threshold:
                sim = 0.0
            elif sim > 0.0:
                edges += 1
            M[i][j] = M[j][i] = sim
    logger.debug("similarity matrix %dx%d, %d edges at threshold %.3f", n, n, edges, threshold)
    return M
