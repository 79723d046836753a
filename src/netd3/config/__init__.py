"""Configuration — netd3.toml discovery, settings, and logging setup."""
