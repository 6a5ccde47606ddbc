"""Fetch a web page and extract its link-preview metadata into one record."""

__version__ = "1.0.0"
