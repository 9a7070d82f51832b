"""Configuration: pydantic models, gochk.toml discovery, settings, logging."""
