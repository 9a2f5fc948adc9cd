from __future__ import annotations
import math
import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Union
from .datatypes import PageRankConfig
from .keywords import KEYWORD_MODES
from .scoring import RANKERS

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "graph"
DEFAULT_SUMMARY_LENGTH = 0.2
DEFAULT_KEYWORD_COUNT = 10
DEFAULT_KEYWORD_MODE = "words"
DEFAULT_SIMILARITY_THRESHOLD = 0.1
DEFAULT_DAMPING = 0.85
DEFAULT_MAX_ITERATIONS = 100
DEFAULT_CONVERGENCE_EPSILON = 1e-6

# names used by the UI layer's configuration surface
_CAMEL_CASE = {
    "summaryLength": "summary_length",
    "keywordCount": "keyword_count",
    "keywordMode": "keyword_mode",
    "similarityThreshold": "similarity_threshold",
    "maxIterations": "max_iterations",
    "convergenceEpsilon": "convergence_epsilon",
}

def _number(name: str, value: Any, default, cast=float):
    if isinstance(value, bool):
        value = None
    try:
        result = cast(value)
        if isinstance(result, float) and not math.isfinite(result):
            raise ValueError(value)
        return result
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid %s=%r, using default %r", name, value, default)
        return default

def _clamp(name: str, value, lo, hi=None):
    clamped = max(lo, value)
    if hi is not None:
        clamped = min(hi, clamped)
    if clamped != value:
        logger.warning("Clamped %s from %r to %r", name, value, clamped)
    return clamped

@dataclass
class SummarizerConfig:
    algorithm: str = DEFAULT_ALGORITHM
    summary_length: Union[int, float] = DEFAULT_SUMMARY_LENGTH  # int = count, float in (0, 1] = proportion
    keyword_count: int = DEFAULT_KEYWORD_COUNT
    keyword_mode: str = DEFAULT_KEYWORD_MODE
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    damping: float = DEFAULT_DAMPING
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    convergence_epsilon: float = DEFAULT_CONVERGENCE_EPSILON

    def __post_init__(self):
        # malformed values are corrected, never raised
        algo = str(self.algorithm).strip().lower()
        if algo not in RANKERS:
            logger.warning("Unknown algorithm %r, falling back to %r", self.algorithm, DEFAULT_ALGORITHM)
            algo = DEFAULT_ALGORITHM
        self.algorithm = algo

        mode = str(self.keyword_mode).strip().lower()
        if mode not in KEYWORD_MODES:
            logger.warning("Unknown keyword mode %r, falling back to %r", self.keyword_mode, DEFAULT_KEYWORD_MODE)
            mode = DEFAULT_KEYWORD_MODE
        self.keyword_mode = mode

        length = self.summary_length
        if isinstance(length, str) and length.strip().lstrip("+-").isdecimal():
            length = int(length)  # "3" is a count, like 3
        if isinstance(length, bool) or not isinstance(length, (int, float)) or not math.isfinite(length):
            length = _number("summary_length", None if isinstance(length, float) else length,
                             DEFAULT_SUMMARY_LENGTH)
        if isinstance(length, float) and length > 1.0:
            length = int(round(length))
        if length <= 0:
            logger.warning("Clamped summary_length from %r to 1", length)
            length = 1
        self.summary_length = length

        self.keyword_count = _clamp("keyword_count",
                                    _number("keyword_count", self.keyword_count, DEFAULT_KEYWORD_COUNT, int), 0)
        self.similarity_threshold = _clamp("similarity_threshold",
                                           _number("similarity_threshold", self.similarity_threshold,
                                                   DEFAULT_SIMILARITY_THRESHOLD), 0.0, 1.0)
        self.damping = _clamp("damping", _number("damping", self.damping, DEFAULT_DAMPING), 0.0, 1.0)
        self.max_iterations = _clamp("max_iterations",
                                     _number("max_iterations", self.max_iterations, DEFAULT_MAX_ITERATIONS, int), 0)
        self.convergence_epsilon = _clamp("convergence_epsilon",
                                          _number("convergence_epsilon", self.convergence_epsilon,
                                                  DEFAULT_CONVERGENCE_EPSILON), 0.0)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SummarizerConfig":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                logger.debug("Ignoring unknown config key %r", key)
        return cls(**kwargs)

    def pagerank_config(self) -> PageRankConfig:
        return PageRankConfig(damping=self.damping,
                              max_iterations=self.max_iterations,
                              epsilon=self.convergence_epsilon)
