"""Infrastructure layer (database wiring and repository implementations)."""
