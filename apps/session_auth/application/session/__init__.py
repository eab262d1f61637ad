"""Session use cases."""
