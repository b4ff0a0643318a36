"""Constants and the exception hierarchy."""
