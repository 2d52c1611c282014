# faces/errors.py


class MalformedGraphError(ValueError):
    """Graph violates the planar-embedding precondition (e.g. a component
    yielded zero or several externally signed faces)."""

    def __init__(self, message, components=None):
        super().__init__(message)
        self.components = components or []
