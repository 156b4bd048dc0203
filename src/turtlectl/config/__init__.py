"""Configuration layer: TOML discovery, layered settings, logging setup."""
