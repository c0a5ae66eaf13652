"""Database engine, sessions and seeding."""
