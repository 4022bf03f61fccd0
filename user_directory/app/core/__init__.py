"""Configuration, logging, error types and persistence."""
