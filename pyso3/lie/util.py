import casadi as ca
import numpy as np

eps = 1e-3  # tolerance for switching to taylor series

x = ca.SX.sym("x")

# sin(x)/x
C1 = ca.Function(
    "sinc",
    [x],
    [ca.if_else(ca.fabs(x) < eps, 1 - x**2 / 6 + x**4 / 120, ca.sin(x) / x)],
)

# (1 - cos(x))/x^2
C2 = ca.Function(
    "cosc",
    [x],
    [
        ca.if_else(
            ca.fabs(x) < eps,
            0.5 - x**2 / 24 + x**4 / 720,
            (1 - ca.cos(x)) / x**2,
        )
    ],
)

# x/(2 sin(x))
C3 = ca.Function(
    "log_coeff",
    [x],
    [
        ca.if_else(
            ca.fabs(x) < eps,
            0.5 + x**2 / 12 + 7 * x**4 / 720,
            x / (2 * ca.sin(x)),
        )
    ],
)

# delete temp variable used to create functions
del x


def as_expr(a):
    """
    Coerce array-like input to a casadi matrix, casadi types pass through.
    :param a: casadi DM/SX, numpy array, list or scalar
    :return: casadi DM or SX
    """
    if isinstance(a, (ca.DM, ca.SX)):
        return a
    return ca.DM(np.asarray(a, dtype=float))


def is_numeric(a):
    """
    True if the expression can be evaluated without free symbols.
    """
    if isinstance(a, ca.SX):
        return len(ca.symvar(a)) == 0
    return True


def to_numpy(a):
    """
    Evaluate a casadi expression to a dense numpy array.
    :raises TypeError: if the expression depends on free symbols
    """
    if isinstance(a, ca.SX):
        if not is_numeric(a):
            raise TypeError("cannot evaluate symbolic expression numerically")
        a = ca.evalf(a)
    return np.array(ca.DM(a).full())
