"""Shared helpers: logging, HTTP and host system access."""
