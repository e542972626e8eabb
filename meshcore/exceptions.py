"""Exception types raised by the mesh processing package."""


class InvalidInputException(ValueError):
    """Invalid input was passed to a function, e.g. a violated precondition."""


class SolverException(RuntimeError):
    """An equation system could not be solved."""


class AllocationException(OverflowError):
    """An allocation would exceed an implementation-defined limit."""


class TopologyException(RuntimeError):
    """A topological error occurred."""


class IOException(OSError):
    """An error occurred while reading or writing data."""


class GLException(RuntimeError):
    """An error was reported by the graphics layer."""