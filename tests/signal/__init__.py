"""Tests for signal types and classifiers."""
