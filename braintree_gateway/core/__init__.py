"""Cross-cutting concerns: configuration, logging and metrics."""
