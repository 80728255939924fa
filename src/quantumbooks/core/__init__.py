"""Core infrastructure: errors, logging, and the clock and output collaborators."""
