"""Domain layer: pure voting logic with no driver dependencies."""
