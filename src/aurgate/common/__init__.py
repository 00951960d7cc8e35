"""Shared helpers: logging, HTTP and operator output."""
