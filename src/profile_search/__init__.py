"""Generative UI pipeline for link-in-bio profile search."""

__version__ = "0.1.0"
