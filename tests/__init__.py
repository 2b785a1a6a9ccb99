"""Test suite for the ta_engine package."""
