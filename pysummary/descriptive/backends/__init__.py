"""Backends for descriptive statistics."""

from pysummary.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = ["CPUDescriptiveBackend"]
