"""Execution chokepoint honoring dry-run and verbosity."""
