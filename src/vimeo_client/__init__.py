"""Typed client and command-line tool for the Vimeo REST API."""

__version__ = "0.1.0"
