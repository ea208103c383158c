"""Shared helpers used across the toolkit."""
