"""Infrastructure layer: concrete store implementations."""
