"""Background worker for approval notifications."""
