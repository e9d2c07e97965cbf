"""Helpers for scanning and cleaning site content."""
