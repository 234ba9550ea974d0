class GraphError(RuntimeError):
    """Base class for errors raised by the graph core."""
    pass


class VertexNotFoundError(GraphError, KeyError):
    """A query named a vertex that is not in the registry."""

    def __init__(self, message, name=None):
        super().__init__(message)
        self.name = name

    def __str__(self):
        # KeyError would quote the message
        return str(self.args[0])
