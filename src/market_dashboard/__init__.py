"""Market dashboard backend: persisted market snapshots with a real-time push channel."""
