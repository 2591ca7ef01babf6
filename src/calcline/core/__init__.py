"""Core calculator pipeline: errors, IR, expression language, configuration."""
