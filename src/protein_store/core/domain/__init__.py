"""Domain layer: models with no I/O."""
