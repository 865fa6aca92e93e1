"""Domain models and request helpers for an order, wallet and group-buy web service."""

__version__ = "1.0.0"