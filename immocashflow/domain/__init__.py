"""Domain models and the calculation engine."""
