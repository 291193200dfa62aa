"""Branch commands."""
