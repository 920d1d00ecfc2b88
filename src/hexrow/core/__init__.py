"""Formatter, configuration and byte source."""
