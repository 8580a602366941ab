"""Simulated command shell built around a quote-aware command-line tokenizer."""

__version__ = "1.0"
