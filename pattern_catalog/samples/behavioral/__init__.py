"""Behavioral pattern samples."""
