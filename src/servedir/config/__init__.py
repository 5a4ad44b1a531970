"""Configuration models and defaults."""
