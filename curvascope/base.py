class CurvascopeError(Exception):
    """Base class for errors raised by curvascope.

    """
    pass

class DomainError(CurvascopeError, ArithmeticError):
    """Thrown if a computation is asked to leave its domain, e.g. dividing
    by a complex number of norm zero, or deriving tiling parameters
    from a degenerate Schläfli symbol.

    """
    pass

class ValidationError(CurvascopeError, ValueError):
    """Thrown if a Schläfli symbol does not describe a regular tiling of
    the hyperbolic plane.

    """
    pass

class UnimplementedModelError(CurvascopeError, NotImplementedError):
    """Thrown if we try to map points out of a model which is listed in
    the catalog but has no coordinate mapping yet.

    """
    pass

class DecodeError(CurvascopeError, ValueError):
    """Thrown if a shared link payload can't be turned back into
    render parameters.

    """
    pass
