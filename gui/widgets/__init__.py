"""Reusable widgets for the employee list window."""
