"""Event API layer resolving the active Calendar Client."""
