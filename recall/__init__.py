"""Recall: personal knowledge base with hybrid retrieval and cited answers."""

__version__ = "0.1.0"
