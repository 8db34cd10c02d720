"""Core application modules: logging, error mapping, middleware and tokens."""
