from .datatypes import Sentence, Document, Edge, Graph, PageRankConfig, SummaryResult
from .preprocessing import PreprocessConfig, STOPWORDS, split_sentences, tokenize, build_frequency_map, segment_and_vectorize, preprocess_text
from .similarity import cosine_similarity, build_similarity
from .graphing import build_graph, out_weights, to_networkx
from .scoring import rank, RANKERS
from .keywords import extract_keywords
from .config import SummarizerConfig
from .summarize import summarize, summarize_async, generate_summary, select_sentences, resolve_count
