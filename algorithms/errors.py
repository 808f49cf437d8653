class MinCutError(Exception):
    """Base class for every error raised by the min-cut estimator."""


class InvalidVertex(MinCutError, IndexError):
    def __init__(self, vertex, n):
        super().__init__(f"vertex {vertex} out of range for {n} vertices")
        self.vertex = vertex
        self.n = n


class InvalidEdge(MinCutError, ValueError):
    pass


class InvalidConfiguration(MinCutError, ValueError):
    pass


class ParseError(MinCutError):
    """
    Malformed line in an edge-list file.

    Args:
        path: file (or other source) the line came from
        line: 1-based line number
        reason: what was wrong with the line
    """

    def __init__(self, path, line: int, reason: str):
        super().__init__(f"{path}:{line}: {reason}")
        self.path = path
        self.line = line
        self.reason = reason
