"""Application layer: gateway use cases."""
