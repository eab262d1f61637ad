"""Session Auth Domain Layer."""
