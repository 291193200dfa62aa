"""Layout commands."""
