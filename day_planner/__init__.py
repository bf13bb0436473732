"""Day Planner: month grid navigation and conflict-free daily event scheduling."""

__version__ = "0.1.0"
