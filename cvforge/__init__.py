"""Résumé profile model, date and icon helpers, and Redis-backed caching and rate limiting."""

__version__ = "0.3.0"