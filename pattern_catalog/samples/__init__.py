"""Runnable code samples for the catalogue, grouped by pattern category.

Every sample module exposes the classes shown in its catalogue entry and a
``demo()`` function returning the output a reader would see when running it.
"""
