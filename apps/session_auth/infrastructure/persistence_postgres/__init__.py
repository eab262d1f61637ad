"""PostgreSQL Persistence Layer."""
