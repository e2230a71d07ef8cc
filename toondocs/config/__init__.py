"""Validation configuration."""
