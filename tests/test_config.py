import logging

import pytest

from text_summarizer.config import SummarizerConfig
from text_summarizer.datatypes import PageRankConfig


def test_defaults():
    cfg = SummarizerConfig()
    assert cfg.algorithm == "graph"
    assert cfg.summary_length == 0.2
    assert cfg.keyword_count == 10
    assert cfg.similarity_threshold == 0.1
    assert cfg.pagerank_config() == PageRankConfig(damping=0.85, max_iterations=100, epsilon=1e-6)


def test_from_mapping_accepts_camel_case():
    cfg = SummarizerConfig.from_mapping({
        "algorithm": "keywords",
        "summaryLength": 4,
        "keywordCount": 7,
        "similarityThreshold": 0.2,
        "damping": 0.9,
        "maxIterations": 50,
        "convergenceEpsilon": 1e-8,
        "theme": "dark",
    })
    assert cfg == SummarizerConfig(algorithm="keywords", summary_length=4, keyword_count=7,
                                   similarity_threshold=0.2, damping=0.9, max_iterations=50,
                                   convergence_epsilon=1e-8)


@pytest.mark.parametrize("kwargs,field,expected", [
    ({"keyword_count": -5}, "keyword_count", 0),
    ({"summary_length": -3}, "summary_length", 1),
    ({"summary_length": 0.0}, "summary_length", 1),
    ({"summary_length": 4.0}, "summary_length", 4),
    ({"summary_length": "3"}, "summary_length", 3),
    ({"similarity_threshold": 1.7}, "similarity_threshold", 1.0),
    ({"similarity_threshold": "abc"}, "similarity_threshold", 0.1),
    ({"damping": -0.2}, "damping", 0.0),
    ({"max_iterations": -1}, "max_iterations", 0),
    ({"convergence_epsilon": float("nan")}, "convergence_epsilon", 1e-6),
    ({"algorithm": "LexRank"}, "algorithm", "graph"),
    ({"algorithm": " Simple "}, "algorithm", "simple"),
    ({"keyword_mode": "sentences"}, "keyword_mode", "words"),
])
def test_malformed_values_are_clamped(kwargs, field, expected):
    assert getattr(SummarizerConfig(**kwargs), field) == expected


def test_clamping_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="text_summarizer.config"):
        SummarizerConfig(keyword_count=-1)
    assert "keyword_count" in caplog.text


@pytest.mark.parametrize("value,expected", [("1", 1), (" 4 ", 4), ("0.5", 0.5), ("1.0", 1.0)])
def test_string_summary_length(value, expected):
    assert SummarizerConfig.from_mapping({"summaryLength": value}).summary_length == expected
