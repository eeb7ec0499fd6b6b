"""Provider configuration and runtime settings."""
