"""Lambda entrypoints for the profile API."""
