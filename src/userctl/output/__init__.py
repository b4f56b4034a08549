"""Output layer — plain, JSON, and Rich rendering of operation results."""
