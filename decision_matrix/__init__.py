"""Weighted decision matrix for ranking competing supplier proposals."""

__version__ = "1.0.0"
