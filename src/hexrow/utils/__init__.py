"""Shared utilities for hexrow."""
