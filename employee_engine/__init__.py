"""Qt-free core of the employee directory viewer."""
