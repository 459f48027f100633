"""Terminal rendering and form validation helpers."""
