"""Tests for the DataFrame indicator adapters."""
