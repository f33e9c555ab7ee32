"""Shared helpers for the build engine."""
