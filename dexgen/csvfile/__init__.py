"""CSV text reading (one fixed dialect: comma separated, double quotes)."""
