"""siteindex - search index generator for the documentation website."""

__version__ = "0.1.0"
