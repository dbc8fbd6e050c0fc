"""Shared utilities for QueryHub."""
