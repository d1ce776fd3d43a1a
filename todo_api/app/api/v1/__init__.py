"""Version 1 of the Todo API."""
