"""Utility modules for nenrei."""
