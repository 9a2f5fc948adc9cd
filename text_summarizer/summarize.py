from __future__ import annotations
import asyncio
import logging
from typing import Any, List, Optional, Sequence, Union
from .config import SummarizerConfig
from .datatypes import Document, SummaryResult
from .keywords import extract_keywords
from .preprocessing import preprocess_text, PreprocessConfig
from .scoring import rank
from .similarity import build_similarity

logger = logging.getLogger(__name__)

def resolve_count(summary_length: Union[int, float], total: int) -> int:
    """
    Number of sentences to keep.
    An int is an explicit count; a float in (0, 1] is a proportion of `total`.
    Always clamped to [1, total] (0 for an empty document).
    """
    if total <= 0:
        return 0
    if isinstance(summary_length, float) and summary_length <= 1.0:
        k = int(round(total * summary_length))
    else:
        k = int(summary_length)
    return min(total, max(1, k))

def select_sentences(scores: Sequence[float], k: int) -> List[int]:
    # highest score first, lower index wins on ties; output in document order
    ranked = sorted(range(len(scores)), key=lambda i: (-scores[i], i))
    selected = ranked[:max(0, k)]
    selected.sort()  # restore original order
    return selected

def generate_summary(doc: Document, scores: List[float], k: int) -> str:
    selected = select_sentences(scores, k)
    return " ".join(doc.sentences[i].text for i in selected)

def _as_config(config: Optional[Union[SummarizerConfig, dict]], overrides: dict) -> SummarizerConfig:
    if isinstance(config, SummarizerConfig):
        if not overrides:
            return config
        base = dict(vars(config))
    else:
        base = dict(config or {})
    base.update(overrides)
    return SummarizerConfig.from_mapping(base)

def summarize(text: str, config: Optional[Union[SummarizerConfig, dict]] = None, **overrides: Any) -> SummaryResult:
    # Pipeline glue
    cfg = _as_config(config, overrides)
    doc = preprocess_text(text or "", cfg=PreprocessConfig())
    if not doc.sentences:
        return SummaryResult(algorithm=cfg.algorithm)

    keywords = extract_keywords(text, cfg.keyword_count, "words")
    sim_matrix = None
    if cfg.algorithm == "graph":
        sim_matrix = build_similarity(doc.sentences, threshold=cfg.similarity_threshold)

    scores = rank(cfg.algorithm, doc.sentences, sim_matrix=sim_matrix,
                  keywords=keywords, pagerank_cfg=cfg.pagerank_config())
    k = resolve_count(cfg.summary_length, len(doc.sentences))
    selected = select_sentences(scores, k)
    logger.info("summarized %d sentences to %d with %s", len(doc.sentences), len(selected), cfg.algorithm)

    if cfg.keyword_mode != "words":
        keywords = extract_keywords(text, cfg.keyword_count, cfg.keyword_mode)
    return SummaryResult(
        sentences=[doc.sentences[i].text for i in selected],
        indices=selected,
        scores=scores,
        keywords=keywords,
        algorithm=cfg.algorithm,
    )

async def summarize_async(text: str, config: Optional[Union[SummarizerConfig, dict]] = None, **overrides: Any) -> SummaryResult:
    """Run `summarize` in the default executor; cancel by discarding the result."""
    cfg = _as_config(config, overrides)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, summarize, text, cfg)
