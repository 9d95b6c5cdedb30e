"""Configuration loading (YAML validated against a JSON schema)."""
