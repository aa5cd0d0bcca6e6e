"""Classic numerical analysis routines in plain Python: linear algebra, root finding,
interpolation, least squares, quadrature, ODE integration and minimisation."""

__version__ = "0.1.0"