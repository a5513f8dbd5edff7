"""Domain layer: records, results, exceptions and ports."""
