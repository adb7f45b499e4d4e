"""Learning use cases, one class per operation."""
