"""Infrastructure: database sessions, SQL repository, logging setup."""
