from __future__ import annotations
import streamlit as st
import pandas as pd
import numpy as np
from typing import List
import matplotlib.pyplot as plt
import networkx as nx
import io

from text_summarizer.sample import SAMPLE_TEXT
from text_summarizer.summarize import summarize, generate_summary, SummarizerConfig, InvalidArgumentError
from text_summarizer.preprocessing import preprocess_text
from text_summarizer.features import inverse_document_frequency, document_frequency, similarity_matrix
from text_summarizer.graphing import build_graph, graph_density, to_networkx
from text_summarizer.scoring import centrality_scores, select_top_k

def load_text_from_file(uploaded_file) -> str:
    """Load text content from an uploaded .txt file."""
    return uploaded_file.read().decode("utf-8")

def draw_graph_visualization(graph, scores: List[float], selected: List[int]):
    """Draw sentences as nodes, similarities above threshold as edges, selected sentences highlighted."""
    G = to_networkx(graph, scores)

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Sentence Similarity Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

        # Node size follows centrality score
        max_score = max(max(scores), 1e-9) if scores else 1.0
        sizes = [400 + 1200 * max(G.nodes[i]['score'], 0.0) / max_score for i in G.nodes()]
        colors = ['gold' if i in selected else 'lightblue' for i in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=sizes, alpha=0.8)

        edges = G.edges(data=True)
        if edges:
            weights = [edge[2]['weight'] for edge in edges]
            max_weight = max(weights) if max(weights) > 0 else 1
            edge_widths = [3 * (w / max_weight) for w in weights]
            nx.draw_networkx_edges(G, pos, ax=ax, width=edge_widths, alpha=0.6, edge_color='gray')

            edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in edges}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

        labels = nx.get_node_attributes(G, 'label')
        nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=10, font_weight='bold')

    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()

    return buf

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    sentence_count = st.sidebar.number_input(
        "Summary sentences",
        min_value=1,
        max_value=50,
        value=2,
        step=1,
        help="Number of sentences to keep"
    )
    clamp_similarity = st.sidebar.checkbox(
        "Clamp negative similarity",
        value=False,
        help="Floor negative cosine similarities at 0 before scoring"
    )
    threshold = st.sidebar.slider(
        "Graph edge threshold",
        min_value=0.0,
        max_value=1.0,
        value=0.1,
        step=0.05,
        help="Only draw edges with similarity at or above this value"
    )

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")

    return int(sentence_count), SummarizerConfig(clamp_similarity=clamp_similarity), threshold, debug_mode

def debug_pipeline(text: str, sentence_count: int, cfg: SummarizerConfig, graph_threshold: float) -> str:
    """Run the pipeline with detailed debugging information."""

    # Step 1: Segmentation & tokenization
    st.header("Step 1: Segmentation & Tokenization")
    with st.expander("Pre-processing Details", expanded=True):
        with st.spinner("Processing text..."):
            doc = preprocess_text(text)
        st.success(f"✅ Split into {len(doc.sentences)} sentences")

        if len(doc.sentences) <= sentence_count:
            st.warning("Document has no more sentences than requested - returning it unchanged")
            return summarize(text, sentence_count, cfg=cfg)

        sentences_data = []
        for s in doc.sentences:
            sentences_data.append({
                "Sentence #": s.idx + 1,
                "Text": s.text[:80] + "..." if len(s.text) > 80 else s.text,
                "Tokens": len(s.tokens),
                "Token List": ", ".join(s.tokens[:8]) + ("..." if len(s.tokens) > 8 else ""),
            })
        st.dataframe(pd.DataFrame(sentences_data), use_container_width=True)

    # Step 2: TF / IDF
    st.header("Step 2: TF-IDF Vectors")
    with st.expander("TF-IDF Details", expanded=True):
        token_lists = [s.tokens for s in doc.sentences]
        idf_scores = inverse_document_frequency(token_lists)
        df_counts = document_frequency(token_lists)

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Unique Terms", len(idf_scores))
        with col2:
            negative = sum(1 for v in idf_scores.values() if v < 0)
            st.metric("Terms with Negative IDF", negative)

        idf_data = [
            {"Term": term, "Sentences": df_counts[term], "IDF": f"{score:.4f}"}
            for term, score in sorted(idf_scores.items(), key=lambda x: x[1], reverse=True)
        ]
        st.dataframe(pd.DataFrame(idf_data), use_container_width=True, height=200)

        # expanders cannot nest, so one section per sentence
        for s in doc.sentences:
            st.markdown(f"**Sentence {s.idx+1}:** {s.text[:60]}...")
            if s.tf_idf_vector:
                rows = [
                    {"Term": term, "TF": s.tf[term], "TF-IDF": f"{w:.4f}"}
                    for term, w in sorted(s.tf_idf_vector.items(), key=lambda x: x[1], reverse=True)
                ]
                st.dataframe(pd.DataFrame(rows), use_container_width=True)
            else:
                st.write("No terms in this sentence")

    # Step 3: Similarity matrix
    st.header("Step 3: Cosine Similarity")
    with st.expander("Similarity Matrix", expanded=True):
        with st.spinner("Computing pairwise similarity..."):
            simM = similarity_matrix([s.tf_idf_vector for s in doc.sentences], clamp=cfg.clamp_similarity)

        n_sentences = len(simM)
        if n_sentences <= 50:
            sim_df = pd.DataFrame(simM,
                                  columns=[f"S{i+1}" for i in range(n_sentences)],
                                  index=[f"S{i+1}" for i in range(n_sentences)])
            st.dataframe(sim_df, use_container_width=True)
        else:
            st.info(f"Matrix too large to display ({n_sentences}×{n_sentences} = {n_sentences**2:,} cells)")

        flat_sim = [simM[i][j] for i in range(n_sentences) for j in range(i+1, n_sentences)]
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Min Similarity", f"{min(flat_sim):.3f}")
        with col2:
            st.metric("Max Similarity", f"{max(flat_sim):.3f}")
        with col3:
            st.metric("Mean Similarity", f"{np.mean(flat_sim):.3f}")
        with col4:
            st.metric("Std Similarity", f"{np.std(flat_sim):.3f}")

    # Step 4: Centrality & selection
    st.header("Step 4: Centrality & Selection")
    with st.expander("Scoring Details", expanded=True):
        scores = centrality_scores(simM)
        selected = select_top_k(scores, sentence_count)

        scoring_data = []
        for s in doc.sentences:
            scoring_data.append({
                "Sentence #": s.idx + 1,
                "Centrality": f"{scores[s.idx]:.4f}",
                "Selected": "✅" if s.idx in selected else "❌",
                "Text": s.text,
            })
        st.dataframe(pd.DataFrame(scoring_data), use_container_width=True)

    # Step 5: Graph
    st.header("Step 5: Similarity Graph")
    with st.expander("Graph Visualization", expanded=True):
        graph = build_graph(doc, simM, threshold=graph_threshold)
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Edges", len(graph.edges))
        with col2:
            st.metric("Graph Density", f"{graph_density(graph):.2%}")
        st.image(draw_graph_visualization(graph, scores, selected))

    return generate_summary(doc, scores, sentence_count)

def main():
    st.title("TF-IDF Centrality Summarizer")
    st.write("Paste text or upload a .txt file to pick its most central sentences")

    sentence_count, cfg, threshold, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt'],
        help="Upload a plain text file to summarize"
    )
    default_text = load_text_from_file(uploaded_file) if uploaded_file is not None else SAMPLE_TEXT
    text = st.text_area("Document", default_text, height=200)

    if st.button("Generate Summary", type="primary"):
        try:
            if debug_mode:
                st.markdown("---")
                st.title("🔍 Pipeline Debug Mode")
                result = debug_pipeline(text, sentence_count, cfg, threshold)
            else:
                with st.spinner("Generating summary..."):
                    result = summarize(text, sentence_count, cfg=cfg)

            st.markdown("---")
            st.header("📋 Final Summary")
            st.text_area("Generated Summary", result, height=150, disabled=True)

            col1, col2, col3 = st.columns(3)
            with col1:
                st.metric("Original Length", len(text.split()))
            with col2:
                st.metric("Summary Length", len(result.split()) if result else 0)
            with col3:
                compression = len(result.split()) / len(text.split()) if text.split() and result else 0
                st.metric("Actual Compression", f"{compression:.2%}")

        except InvalidArgumentError as e:
            st.error(f"Invalid parameters: {e}")

if __name__ == "__main__":
    main()
