"""Output layer — text, JSON, and Rich rendering of service results."""
