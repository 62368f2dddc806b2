"""Similarity, keyword and hybrid retrieval."""

from recall.core.retrieval.hybrid_retriever import HybridRetriever
from recall.core.retrieval.keyword_scorer import KeywordScorer, extract_keywords
from recall.core.retrieval.similarity import cosine_similarity

__all__ = ["HybridRetriever", "KeywordScorer", "cosine_similarity", "extract_keywords"]
