"""Command line interface for appconfigr."""
