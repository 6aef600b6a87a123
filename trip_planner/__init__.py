"""In-memory travel planner: add, edit and delete trips."""
