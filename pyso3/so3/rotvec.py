"""
A module for rotation vectors (angle-axis), the coordinates of the Lie algebra so(3).

There are 3 parameters, the norm is the rotation angle and the direction the axis.
Conversions to and from the rotation matrix are the exponential and logarithm maps.
"""
import casadi as ca
from scipy.spatial.transform import Rotation

from . import convert
from .base import SO3Base
from .traits import RotationVectorRep
from ..lie.algebra import hat, vee
from ..lie.util import C1, C2, C3

near_pi = -0.99  # below this cos(angle) the axis is taken from the symmetric part


def to_dcm(v):
    """
    The exponential map, Rodrigues' formula.
    :param v: rotation vector
    :return: rotation matrix
    """
    assert v.shape == (3, 1)
    theta = ca.norm_2(v)
    X = hat(v)
    return type(v).eye(3) + C1(theta) * X + C2(theta) * ca.mtimes(X, X)


def from_dcm(R):
    """
    The logarithm map, returning the principal value with angle in [0, pi].

    At an angle of exactly pi, v and -v are the same rotation and the sign is
    chosen so the largest component of the axis is positive.
    :param R: rotation matrix
    :return: rotation vector
    """
    assert R.shape == (3, 3)
    w = vee(R - R.T)
    s = ca.norm_2(w) / 2
    c = ca.fmax(ca.fmin((ca.trace(R) - 1) / 2, 1), -1)
    theta = ca.atan2(s, c)

    # near pi, R + R^T = 2 (c I + (1 - c) a a^T)
    B = ((R + R.T) / 2 - c * type(R).eye(3)) / (1 - c)
    a = ca.if_else(
        ca.logic_and(B[0, 0] >= B[1, 1], B[0, 0] >= B[2, 2]),
        B[:, 0] / ca.sqrt(B[0, 0]),
        ca.if_else(B[1, 1] >= B[2, 2], B[:, 1] / ca.sqrt(B[1, 1]), B[:, 2] / ca.sqrt(B[2, 2])),
    )
    a = a / ca.norm_2(a)
    a = ca.if_else(ca.dot(a, w) < 0, -a, a)

    return ca.if_else(c < near_pi, theta * a, C3(theta) * w)


convert.register_pivot(RotationVectorRep, to_canonical=to_dcm, from_canonical=from_dcm)


class AngleAxis(SO3Base):
    """
    SO(3) element stored as a rotation vector, angle * axis.
    """

    Rep = RotationVectorRep

    def set_identity(self, S=None):
        self._rep_data = self._scalar_type(S).zeros(3, 1)

    def invert(self):
        self._rep_data = -self._rep_data

    def _multiply_inplace(self, other):
        R = ca.mtimes(self.to_rotation_matrix(), other.to_rotation_matrix())
        self._rep_data = from_dcm(R)

    def set_random(self, rng=None):
        self._rep_data = ca.DM(Rotation.random(None, rng).as_rotvec())

    def angle(self):
        return ca.norm_2(self._rep_data)
