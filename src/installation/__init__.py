"""Installed version discovery and source installation."""
