"""Creational pattern samples."""
