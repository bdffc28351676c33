"""Domain layer: monads, entities and shared validation."""
