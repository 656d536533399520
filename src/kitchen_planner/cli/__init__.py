"""Command-line interface for kitchen-planner."""
