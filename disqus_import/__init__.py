"""Disqus export to Jekyll comment data files."""

__version__ = "0.1.0"
