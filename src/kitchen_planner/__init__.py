"""Kitchen cabinet layout planner and bill of materials generator."""

__version__ = "0.1.0"
