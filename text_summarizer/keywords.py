"""
RAKE-style keyword extraction.

Candidate phrases are maximal runs of non-stopword tokens over the whole text.
For every word:
    frequency = occurrences across all phrases
    degree    = sum of the distinct-word count of each phrase it occurs in
    score     = degree / frequency
Phrases score as the sum of their words' scores. Phrase mode returns each
distinct phrase once, at its first occurrence.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Tuple
from .preprocessing import PreprocessConfig, STOPWORDS, tokenize

logger = logging.getLogger(__name__)

KEYWORD_MODES = ("words", "phrases")

# keep stopwords so they can act as phrase separators
_KEYWORD_CFG = PreprocessConfig(remove_stopwords=False, allow_digits=True, allow_apostrophes=True)

def candidate_phrases(text: str) -> List[List[str]]:
    phrases: List[List[str]] = []
    current: List[str] = []
    for word in tokenize(text, _KEYWORD_CFG):
        if word in STOPWORDS:
            if current:
                phrases.append(current)
                current = []
        else:
            current.append(word)
    if current:
        phrases.append(current)
    return phrases

def word_scores(phrases: List[List[str]]) -> Dict[str, float]:
    freq: Dict[str, int] = {}
    degree: Dict[str, int] = {}
    for phrase in phrases:
        size = len(set(phrase))
        for word in phrase:
            freq[word] = freq.get(word, 0) + 1
            degree[word] = degree.get(word, 0) + size
    return {w: degree[w] / freq[w] for w in freq}

def _top(scored: List[Tuple[str, float]], top_k: int) -> List[str]:
    # sorted() is stable: equal scores keep first-encountered order
    ranked = sorted(scored, key=lambda x: x[1], reverse=True)
    return [item for item, _ in ranked[:top_k]]

def extract_keywords(text: str, top_k: int = 10, mode: str = "words") -> List[str]:
    if mode not in KEYWORD_MODES:
        raise ValueError(f"Unknown keyword mode: {mode}")
    top_k = max(0, int(top_k))
    if top_k == 0 or not text or not text.strip():
        return []

    phrases = candidate_phrases(text)
    scores = word_scores(phrases)
    logger.debug("keyword candidates: %d phrases, %d words", len(phrases), len(scores))

    if mode == "phrases":
        phrase_scores: Dict[str, float] = {}
        for p in phrases:
            joined = " ".join(p)
            if joined not in phrase_scores:
                phrase_scores[joined] = sum(scores[w] for w in p)
        return _top(list(phrase_scores.items()), top_k)
    return _top(list(scores.items()), top_k)
