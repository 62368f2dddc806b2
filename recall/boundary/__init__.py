"""Adapters to external systems: the database and the generative provider."""
