"""Environment commands."""
