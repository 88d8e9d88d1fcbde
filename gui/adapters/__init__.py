"""GUI adapter layer.

This package provides thin Qt-shaped adapters over engine services.

Notes
-----
Adapters exist to:
- keep the engine free of Qt,
- keep network calls off the UI thread,
- deliver engine results back on the UI thread.
"""
