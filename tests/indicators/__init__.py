"""Tests for the pure indicator functions."""
