import asyncio

import pytest

from text_summarizer.config import SummarizerConfig
from text_summarizer.preprocessing import preprocess_text
from text_summarizer.summarize import (
    generate_summary, resolve_count, select_sentences, summarize, summarize_async,
)

ALGORITHMS = ["frequency", "simple", "keywords", "graph"]


def test_simple_example_returns_first_sentences(ai_text):
    result = summarize(ai_text, algorithm="simple", summary_length=2)
    assert result.sentences == [
        "Artificial intelligence is transforming industries.",
        "It enables new technologies and improves efficiency.",
    ]
    assert result.indices == [0, 1]
    assert result.text == " ".join(result.sentences)


def test_frequency_ties_break_by_index(ai_text):
    assert summarize(ai_text, algorithm="frequency", summary_length=2).indices == [1, 3]


def test_keyword_overlap_summary(ai_text):
    result = summarize(ai_text, algorithm="keywords", summary_length=2, keyword_count=10)
    assert result.indices == [1, 2]
    assert result.keywords[:6] == ["ethical", "challenges", "remain", "ai", "applications", "range"]
    assert len(result.keywords) == 10


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("k", [1, 3, 5, 50])
def test_count_and_order(long_text, algorithm, k):
    total = len(preprocess_text(long_text).sentences)
    result = summarize(long_text, algorithm=algorithm, summary_length=k)
    assert len(result.sentences) == min(k, total) >= 1
    assert result.indices == sorted(result.indices)
    source = [s.text for s in preprocess_text(long_text).sentences]
    assert result.sentences == [source[i] for i in result.indices]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_idempotent(long_text, algorithm):
    first = summarize(long_text, algorithm=algorithm, summary_length=3, keyword_count=5)
    second = summarize(long_text, algorithm=algorithm, summary_length=3, keyword_count=5)
    assert first == second


def test_graph_prefers_connected_sentences(long_text):
    result = summarize(long_text, algorithm="graph", summary_length=2)
    assert all("solar" in s.lower() for s in result.sentences)
    assert sum(result.scores) == pytest.approx(1.0, abs=1e-4)


def test_disjoint_sentences_pick_first():
    result = summarize("Cats purr softly. Rockets launch upward.", algorithm="graph", summary_length=1)
    assert result.scores == pytest.approx([0.5, 0.5])
    assert result.sentences == ["Cats purr softly."]


@pytest.mark.parametrize("text", ["", "   \n\n  "])
def test_empty_input_is_valid_result(text):
    result = summarize(text)
    assert result.sentences == []
    assert result.keywords == []
    assert result.text == ""


def test_proportion_length(ai_text):
    assert len(summarize(ai_text, summary_length=0.5).sentences) == 2
    assert len(summarize(ai_text, summary_length=0.01).sentences) == 1


def test_phrase_keywords(ai_text):
    result = summarize(ai_text, keyword_mode="phrases", keyword_count=1)
    assert result.keywords == ["ethical challenges remain ai applications range"]


def test_accepts_config_object_and_mapping(ai_text):
    cfg = SummarizerConfig(algorithm="simple", summary_length=1)
    assert summarize(ai_text, cfg).indices == [0]
    assert summarize(ai_text, {"algorithm": "simple", "summaryLength": 3}).indices == [0, 1, 2]
    assert summarize(ai_text, cfg, summary_length=2).indices == [0, 1]


def test_summarize_async_matches_sync(long_text):
    expected = summarize(long_text, summary_length=2)
    assert asyncio.run(summarize_async(long_text, summary_length=2)) == expected


@pytest.mark.parametrize("length,total,expected", [
    (2, 4, 2),
    (10, 3, 3),
    (0, 3, 1),
    (0.2, 4, 1),
    (0.5, 4, 2),
    (1.0, 4, 4),
    (3, 0, 0),
])
def test_resolve_count(length, total, expected):
    assert resolve_count(length, total) == expected


def test_select_sentences_restores_order():
    assert select_sentences([1.0, 3.0, 0.5, 2.0], 2) == [1, 3]
    assert select_sentences([5.0, 5.0, 5.0], 2) == [0, 1]
    assert select_sentences([], 3) == []


def test_generate_summary(ai_text):
    doc = preprocess_text(ai_text)
    assert generate_summary(doc, [0.1, 0.2, 0.9, 0.3], 2) == (
        "However, ethical challenges remain. AI applications range from healthcare to finance."
    )


def test_string_count_matches_integer_count(ai_text):
    as_string = summarize(ai_text, {"summaryLength": "1"})
    as_int = summarize(ai_text, {"summaryLength": 1})
    assert len(as_string.sentences) == len(as_int.sentences) == 1
    assert as_string == as_int
