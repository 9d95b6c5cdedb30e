"""Conversion services: normalization, schema, header, entries, output."""
