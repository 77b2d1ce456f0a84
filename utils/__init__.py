"""Shared constants, helpers and JSON utilities."""
