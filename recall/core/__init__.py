"""Retrieval and answer-synthesis core (no web framework or ORM imports)."""
