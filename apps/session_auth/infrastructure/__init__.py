"""Session Auth Infrastructure Layer."""
