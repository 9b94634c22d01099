"""Request descriptions, response models and helpers for an OpenAI-compatible REST API."""

__version__ = "0.1.0"