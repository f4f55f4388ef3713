"""Fixed-depth alpha-beta chess bot built on python-chess."""
