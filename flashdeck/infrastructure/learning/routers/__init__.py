"""API routers for the learning module."""
