from __future__ import annotations
import streamlit as st
import re
import os
import logging
import pandas as pd
import numpy as np
from typing import List
import matplotlib.pyplot as plt
import networkx as nx
import io

from text_summarizer.config import SummarizerConfig
from text_summarizer.summarize import summarize, resolve_count, select_sentences
from text_summarizer.preprocessing import preprocess_text
from text_summarizer.similarity import build_similarity
from text_summarizer.graphing import build_graph, out_weights, to_networkx
from text_summarizer.scoring import rank
from text_summarizer.keywords import extract_keywords, candidate_phrases, word_scores

logging.basicConfig(
    level=os.environ.get("SUMMARIZER_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("summarizer.app")

ALGORITHMS = {
    "graph": "Graph centrality (PageRank)",
    "frequency": "Word frequency",
    "keywords": "Keyword overlap",
    "simple": "First sentences",
}

def extract_rtf_text(rtf_content):
    """Extract plain text from RTF content."""
    # Remove RTF control words and groups
    text = re.sub(r'\\[a-z]+-?\d* ?', '', rtf_content)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    # Clean up extra whitespace
    text = re.sub(r'\s+', ' ', text)
    return text.strip()

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    # Remove code blocks first so their content is not treated as markup
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    # Remove headers
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    # Remove bold and italic
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    # Remove links
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    # Remove horizontal rules
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8", errors="replace")

    if file_extension == 'rtf':
        return extract_rtf_text(content)
    elif file_extension == 'md':
        return extract_markdown_text(content)
    else:  # txt and other formats
        return content

def count_words(text: str) -> int:
    # multiple spaces/newlines count as one separator
    return len(text.split())

def format_word_count(text: str) -> str:
    n = count_words(text)
    return f"{n} word{'s' if n != 1 else ''}"

def export_text(sentences: List[str], keywords: List[str]) -> str:
    """Plain-text export of a summary and its keywords."""
    out = "\n\n".join(sentences)
    if keywords:
        out += "\n\nKeywords: " + ", ".join(keywords)
    return out + "\n"

def draw_graph_visualization(graph, selected: List[int]):
    """Draw the sentence similarity graph, highlighting selected sentences."""
    G = to_networkx(graph)

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Sentence Similarity Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

        colors = ['gold' if i in selected else 'lightblue' for i in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=800, alpha=0.8)

        # Edge thickness based on weight
        edges = G.edges(data=True)
        if edges:
            weights = [edge[2]['weight'] for edge in edges]
            max_weight = max(weights) if weights else 1
            edge_widths = [3 * (w / max_weight) for w in weights]
            nx.draw_networkx_edges(G, pos, ax=ax, width=edge_widths, alpha=0.6, edge_color='gray')

        labels = {i: f"S{i+1}" for i in G.nodes()}
        nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=10, font_weight='bold')

        # Edge weight labels for small graphs
        if len(G.nodes) <= 10:
            edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    # Convert plot to image for Streamlit
    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)

    return buf

def create_sidebar_controls() -> tuple:
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    algorithm = st.sidebar.selectbox(
        "Algorithm",
        options=list(ALGORITHMS),
        format_func=ALGORITHMS.get,
        help="Sentence ranking strategy",
    )
    length = st.sidebar.slider("Summary length (sentences)", min_value=1, max_value=20, value=3, step=1)
    keyword_count = st.sidebar.slider("Keywords", min_value=0, max_value=30, value=10, step=1)
    keyword_mode = st.sidebar.radio("Keyword mode", options=["words", "phrases"], horizontal=True)

    st.sidebar.header("Graph")
    threshold = st.sidebar.slider(
        "Similarity threshold",
        min_value=0.0,
        max_value=1.0,
        value=0.1,
        step=0.05,
        help="Similarities below this value are dropped from the graph",
    )
    damping = st.sidebar.slider("Damping factor", min_value=0.5, max_value=0.99, value=0.85, step=0.01)
    max_iterations = st.sidebar.number_input("Max iterations", min_value=1, max_value=1000, value=100)

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    config = SummarizerConfig(
        algorithm=algorithm,
        summary_length=int(length),
        keyword_count=int(keyword_count),
        keyword_mode=keyword_mode,
        similarity_threshold=threshold,
        damping=damping,
        max_iterations=int(max_iterations),
    )
    return config, debug_mode

def debug_pipeline(text: str, cfg: SummarizerConfig) -> None:
    """Show the intermediate results of every pipeline step."""

    # Step 1: Pre-processing
    st.header("Step 1: Pre-processing")
    with st.expander("Sentences and tokens", expanded=True):
        doc = preprocess_text(text)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Sentences", len(doc.sentences))
        with col2:
            total_tokens = sum(len(s.tokens) for s in doc.sentences)
            st.metric("Content Tokens", total_tokens)
        with col3:
            st.metric("Unique Terms", len({t for s in doc.sentences for t in s.tokens}))

        sentences_data = []
        for s in doc.sentences:
            top_terms = sorted(s.freq_map.items(), key=lambda x: x[1], reverse=True)[:5]
            sentences_data.append({
                "Sentence #": s.idx + 1,
                "Original Text": s.text[:80] + "..." if len(s.text) > 80 else s.text,
                "Tokens": len(s.tokens),
                "Processed Tokens": ", ".join(s.tokens[:8]) + ("..." if len(s.tokens) > 8 else ""),
                "Top Terms": ", ".join(f"{t}:{c}" for t, c in top_terms) or "No terms",
            })
        st.dataframe(pd.DataFrame(sentences_data), use_container_width=True)

    if not doc.sentences:
        st.warning("Nothing to summarize")
        return

    # Step 2: Similarity
    st.header("Step 2: Similarity Matrix")
    with st.expander("Cosine similarity", expanded=True):
        simM = build_similarity(doc.sentences, threshold=cfg.similarity_threshold)
        n = len(simM)
        if n <= 50:
            labels = [f"S{i+1}" for i in range(n)]
            st.dataframe(pd.DataFrame(simM, columns=labels, index=labels), use_container_width=True)
        else:
            st.info(f"Matrix too large to display ({n}×{n} = {n**2:,} cells)")

        flat_sim = np.array([simM[i][j] for i in range(n) for j in range(i+1, n)])
        if flat_sim.size:
            col1, col2, col3, col4 = st.columns(4)
            with col1:
                st.metric("Min Similarity", f"{flat_sim.min():.3f}")
            with col2:
                st.metric("Max Similarity", f"{flat_sim.max():.3f}")
            with col3:
                st.metric("Mean Similarity", f"{np.mean(flat_sim):.3f}")
            with col4:
                st.metric("Non-zero Pairs", int(np.count_nonzero(flat_sim)))

    # Step 3: Graph
    st.header("Step 3: Graph")
    graph = build_graph(doc, simM)
    scores = rank(cfg.algorithm, doc.sentences, sim_matrix=simM,
                  keywords=extract_keywords(text, cfg.keyword_count, "words"),
                  pagerank_cfg=cfg.pagerank_config())
    k = resolve_count(cfg.summary_length, len(doc.sentences))
    selected = select_sentences(scores, k)
    with st.expander("Graph details", expanded=True):
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Nodes (Sentences)", len(graph.nodes))
        with col2:
            st.metric("Edges", len(graph.edges))
        with col3:
            max_possible_edges = len(graph.nodes) * (len(graph.nodes) - 1) // 2
            density = len(graph.edges) / max_possible_edges if max_possible_edges > 0 else 0
            st.metric("Graph Density", f"{density:.2%}")

        if len(graph.nodes) <= 50:
            try:
                st.image(draw_graph_visualization(graph, selected),
                         caption="Selected sentences in gold", use_container_width=True)
            except Exception as e:
                st.error(f"Could not generate graph visualization: {str(e)}")
        else:
            st.info(f"Graph too large to visualize ({len(graph.nodes)} nodes)")

    # Step 4: Scoring and selection
    st.header("Step 4: Scoring and Selection")
    with st.expander("Scores", expanded=True):
        weights = out_weights(simM)
        scoring_data = []
        for s in doc.sentences:
            scoring_data.append({
                "Sentence #": s.idx + 1,
                "Score": f"{scores[s.idx]:.4f}",
                "Out Weight": f"{weights[s.idx]:.3f}",
                "Selected": "✅" if s.idx in selected else "❌",
                "Text": s.text,
            })
        st.dataframe(pd.DataFrame(scoring_data), use_container_width=True)

    # Step 5: Keywords
    st.header("Step 5: Keywords")
    with st.expander("Word scores (degree / frequency)", expanded=False):
        ws = word_scores(candidate_phrases(text))
        kw_df = pd.DataFrame([{"Word": w, "Score": round(v, 3)} for w, v in ws.items()])
        if not kw_df.empty:
            kw_df = kw_df.sort_values("Score", ascending=False, kind="stable")
        st.dataframe(kw_df, use_container_width=True, height=250)

def render_result(result) -> None:
    st.header("Summary")
    if not result.sentences:
        st.info("Nothing to summarize")
        return
    for sentence in result.sentences:
        st.markdown(sentence)

    if result.keywords:
        st.subheader("Top Keywords")
        chips = " ".join(f"`{k}`" for k in result.keywords)
        st.markdown(chips)

    st.download_button(
        "Download summary (.txt)",
        data=export_text(result.sentences, result.keywords),
        file_name="summary.txt",
        mime="text/plain",
    )

def main():
    st.title("Extractive Summarizer")
    st.write("Paste text or upload a file to extract key sentences and keywords")

    cfg, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Supports .txt, .md and .rtf formats",
    )
    initial = load_text_from_file(uploaded_file) if uploaded_file is not None else ""
    text = st.text_area("Text", initial, height=250)
    st.caption(format_word_count(text))

    if st.button("Summarize", type="primary"):
        if not text.strip():
            st.warning("Enter some text first")
            return
        try:
            with st.spinner("Summarizing..."):
                result = summarize(text, cfg)
            if debug_mode:
                st.markdown("---")
                debug_pipeline(text, cfg)
            st.markdown("---")
            render_result(result)

            col1, col2, col3 = st.columns(3)
            with col1:
                st.metric("Original Length", count_words(text))
            with col2:
                st.metric("Summary Length", count_words(result.text))
            with col3:
                compression = count_words(result.text) / count_words(text)
                st.metric("Actual Compression", f"{compression:.2%}")
        except Exception as e:
            logger.exception("summarization failed")
            st.error(f"Error generating summary: {str(e)}")
            st.exception(e)

if __name__ == "__main__":
    main()
