"""Structured-record validation."""
