"""Shared row types and value normalization."""
