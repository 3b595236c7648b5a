"""Exercise Tracker API package."""
