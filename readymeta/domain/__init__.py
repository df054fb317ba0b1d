"""Domain layer: metadata entities and errors."""
