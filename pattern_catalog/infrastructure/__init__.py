"""Infrastructure layer - persistence, markdown tooling, rendering and logging."""
