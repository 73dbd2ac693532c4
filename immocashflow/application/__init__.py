"""Application layer: orchestration on top of the engine."""
