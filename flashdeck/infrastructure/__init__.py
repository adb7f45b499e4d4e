"""Infrastructure layer: persistence, sync, HTTP."""
