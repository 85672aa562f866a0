"""In-process server state."""
