# microdot/services/exceptions.py

class SnapshotError(Exception):
    """Raised when a snapshot cannot be read or has an invalid layout."""
    pass

class RenderError(Exception):
    """Raised when Graphviz is missing or fails to render."""
    pass
