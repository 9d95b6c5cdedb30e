"""Logging: labeled console output and the JSON Lines error log."""
