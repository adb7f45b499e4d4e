"""Learning infrastructure adapters."""
