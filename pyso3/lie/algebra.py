"""
The Lie algebra so(3), identified with 3-vectors through the hat (wedge)
and vee maps.
"""
import numpy as np

from .. import config
from .util import as_expr, is_numeric, to_numpy


# noinspection PyPep8Naming
def hat(v):
    """
    Take Lie algebra components and builds a Lie algebra element.
    :param v: 3-vector
    :return: 3x3 skew-symmetric matrix
    """
    v = as_expr(v)
    assert v.shape == (3, 1)
    X = type(v)(3, 3)
    X[0, 1] = -v[2]
    X[0, 2] = v[1]
    X[1, 0] = v[2]
    X[1, 2] = -v[0]
    X[2, 0] = -v[1]
    X[2, 1] = v[0]
    return X


# noinspection PyPep8Naming
def vee(X):
    """
    Takes a Lie algebra element and extracts components.

    The three entries (X[2, 1], X[0, 2], X[1, 0]) are read regardless of
    the rest of the matrix, unless config.check_preconditions is set.
    :param X: 3x3 skew-symmetric matrix
    :return: 3-vector
    :raises ValueError: if checking is enabled and X is not skew-symmetric
    """
    X = as_expr(X)
    assert X.shape == (3, 3)
    if config.check_preconditions and is_numeric(X):
        Xn = to_numpy(X)
        if np.max(np.abs(Xn + Xn.T)) > config.validity_tol:
            raise ValueError("matrix is not skew-symmetric:\n{}".format(Xn))
    v = type(X)(3, 1)
    v[0, 0] = X[2, 1]
    v[1, 0] = X[0, 2]
    v[2, 0] = X[1, 0]
    return v
