"""Shared utilities: error types and terminal helpers."""
