"""Helpers for reading documents from disk."""
