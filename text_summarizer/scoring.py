from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Sequence
from .datatypes import Sentence, PageRankConfig, ScoreVector, SimilarityMatrix
from .graphing import out_weights
from .similarity import build_similarity

logger = logging.getLogger(__name__)

def _pagerank_scores(simM: SimilarityMatrix, damping: float = 0.85, max_iter: int = 100, tolerance: float = 1e-6) -> List[float]:
    """
    Compute PageRank scores over a weighted similarity matrix.

    PageRank Formula: PR(Si) = (1-d)/N + d × Σ(w_ji / W_j × PR(Sj))

    W_j is the outbound weight sum of row j. Rows with W_j == 0 contribute
    nothing (their mass is not redistributed); the vector is renormalised to
    sum to 1 after every iteration instead.

    Args:
        simM: N x N similarity matrix
        damping: Damping factor (typically 0.85)
        max_iter: Maximum number of iterations
        tolerance: Convergence tolerance on the L1 difference

    Returns:
        List of PageRank scores for each sentence
    """
    n = len(simM)
    if n == 0:
        return []

    # Initialize PageRank scores uniformly
    pr_scores = [1.0 / n] * n
    out_w = out_weights(simM)

    # Incoming edges per node: (source, normalised weight)
    incoming: List[List[tuple]] = [[] for _ in range(n)]
    for j in range(n):
        if out_w[j] <= 0.0:
            continue
        for i, w in enumerate(simM[j]):
            if w > 0.0:
                incoming[i].append((j, w / out_w[j]))

    for iteration in range(1, max_iter + 1):
        new_pr_scores = [(1.0 - damping) / n] * n
        for i in range(n):
            for j, w in incoming[i]:
                new_pr_scores[i] += damping * w * pr_scores[j]

        total = sum(new_pr_scores)
        if total > 0.0:
            new_pr_scores = [s / total for s in new_pr_scores]
        else:
            new_pr_scores = [1.0 / n] * n

        diff = sum(abs(new_pr_scores[i] - pr_scores[i]) for i in range(n))
        pr_scores = new_pr_scores
        if diff < tolerance:
            logger.debug("pagerank converged after %d iterations (diff=%.2e)", iteration, diff)
            break
    else:
        logger.debug("pagerank stopped at iteration cap %d", max_iter)

    return pr_scores

def rank_frequency(sentences: Sequence[Sentence], **_) -> ScoreVector:
    return [float(len(s.tokens)) for s in sentences]

def rank_simple(sentences: Sequence[Sentence], **_) -> ScoreVector:
    # position only: earlier sentences always outrank later ones
    n = len(sentences)
    return [float(n - i) for i in range(n)]

def rank_keywords(sentences: Sequence[Sentence], keywords: Optional[Sequence[str]] = None, **_) -> ScoreVector:
    kw = set(keywords or ())
    return [float(sum(1 for t in s.tokens if t in kw)) for s in sentences]

def rank_graph(sentences: Sequence[Sentence],
               sim_matrix: Optional[SimilarityMatrix] = None,
               pagerank_cfg: Optional[PageRankConfig] = None,
               **_) -> ScoreVector:
    if sim_matrix is None:
        sim_matrix = build_similarity(sentences)
    if len(sim_matrix) != len(sentences):
        raise ValueError(
            f"similarity matrix has {len(sim_matrix)} rows for {len(sentences)} sentences")
    cfg = pagerank_cfg or PageRankConfig()
    return _pagerank_scores(sim_matrix, damping=cfg.damping,
                            max_iter=cfg.max_iterations, tolerance=cfg.epsilon)

RANKERS: Dict[str, Callable[..., ScoreVector]] = {
    "frequency": rank_frequency,
    "simple": rank_simple,
    "keywords": rank_keywords,
    "graph": rank_graph,
}

def rank(strategy: str,
         sentences: Sequence[Sentence],
         sim_matrix: Optional[SimilarityMatrix] = None,
         keywords: Optional[Sequence[str]] = None,
         pagerank_cfg: Optional[PageRankConfig] = None) -> ScoreVector:
    """Score every sentence with the ranking strategy named by `strategy`."""
    try:
        ranker = RANKERS[strategy]
    except KeyError:
        raise ValueError(f"Unknown ranking strategy: {strategy}") from None
    return ranker(sentences, sim_matrix=sim_matrix, keywords=keywords, pagerank_cfg=pagerank_cfg)
