"""Core building blocks shared by the dagstore server: database, I/O models, logging and monitoring."""
