"""Infrastructure layer - adapters, observability and monitoring."""
