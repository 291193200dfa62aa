"""Commit commands."""
