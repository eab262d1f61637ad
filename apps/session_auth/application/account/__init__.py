"""Account use cases."""
