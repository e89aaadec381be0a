"""Podcast generator: topics or a blog URL in, script and MP3 out."""

__version__ = "0.1.0"
