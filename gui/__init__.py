"""PySide6 front end for the employee directory viewer."""
