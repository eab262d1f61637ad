"""Session Auth Application Layer."""
