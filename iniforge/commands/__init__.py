"""Click command palette."""
