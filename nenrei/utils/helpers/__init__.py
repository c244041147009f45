"""Parsing helpers and exception types."""
