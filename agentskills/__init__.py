"""Agent skills toolkit: review comment fetcher and OAuth key generator."""

__version__ = "0.1.0"
