"""Command-line launcher for the employee directory viewer."""
