"""HTTP adapter for the progression engine."""
