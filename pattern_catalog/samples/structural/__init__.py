"""Structural pattern samples."""
