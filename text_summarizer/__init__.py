from .datatypes import Sentence, Document, Edge, Graph, SparseVector
from .preprocessing import split_sentences, tokenize, preprocess_text
from .features import (term_frequency, document_frequency, inverse_document_frequency,
                       tfidf_vector, cosine_similarity, similarity_matrix)
from .graphing import build_graph, graph_density, to_networkx
from .scoring import centrality_scores, rank_sentences, select_top_k
from .summarize import (InvalidArgumentError, SummarizerConfig, summarize, summarize_by_ratio,
                        sentence_count_for_ratio, generate_summary)
