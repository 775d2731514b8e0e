"""Domain layer - catalogue entries and markdown documents."""
