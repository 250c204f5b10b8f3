"""Rules file loading and validation."""
