"""Batch module for solving many puzzle files."""

from .runner import BatchRunner, BatchResult

__all__ = ["BatchRunner", "BatchResult"]
