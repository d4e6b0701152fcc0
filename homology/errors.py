class HomologyError(Exception):
    pass


class SimplexError(HomologyError, ValueError):
    """Raised for simplices that cannot be constructed (bad or repeated vertices)."""


class FiltrationError(HomologyError, ValueError):
    """
    Raised when a complex violates the filtration invariant.

    `index` is the position of the offending simplex, `face` the vertex tuple
    of the boundary face that is missing or ordered after it (if any).
    """

    def __init__(self, message, index=None, face=None):
        super().__init__(message)
        self.index = index
        self.face = face
