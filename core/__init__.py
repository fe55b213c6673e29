"""Core model and UI logic for the starter selection screen. No Qt imports."""
