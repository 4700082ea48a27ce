"""Validation rules, info.json models and a job runner for token and chain asset metadata."""

__version__ = "0.1.0"

__all__ = ["config", "models", "fields", "info", "report", "runner"]