"""Test suite for servedir."""
