"""Weighted, conflict-aware effect selection for item enchanting."""
