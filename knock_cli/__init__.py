"""Command-line client for the Knock management API."""

__version__ = "0.1.0"
