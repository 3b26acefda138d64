"""
A module for Modified Rodrigues Parameters (MRPs)

This is a representation of SO(3). It has 3 parameter. There is a singularity at a rotation of 2*pi. This singularity
can be avoided by switching to the shadow set. One of the two sets will always have magnitude less than one, and
this module always returns that one.
"""
import casadi as ca

from . import convert, quat
from .base import SO3Base
from .traits import MrpRep, QuaternionRep, RotationVectorRep
from .. import config
from ..lie.algebra import hat


def shadow(r):
    """
    The MRPs of the quaternion with opposite sign, the same attitude.
    """
    assert r.shape == (3, 1)
    n_sq = ca.dot(r, r)
    return ca.if_else(n_sq > config.eps, -r / n_sq, r)


def shadow_if_necessary(r):
    assert r.shape == (3, 1)
    return ca.if_else(ca.dot(r, r) > 1, shadow(r), r)


def product(a, b):
    """
    Take the product of two MRPs, representing successive rotations such that:
    to_dcm(product(a, b)) = to_dcm(a) @ to_dcm(b)
    """
    assert a.shape == (3, 1)
    assert b.shape == (3, 1)
    na_sq = ca.dot(a, a)
    nb_sq = ca.dot(b, b)
    den = 1 + na_sq * nb_sq - 2 * ca.dot(b, a)
    r = ((1 - na_sq) * b + (1 - nb_sq) * a - 2 * ca.cross(b, a)) / den
    # den vanishes for a composite rotation of 2*pi, fall back to quaternions
    r = ca.if_else(ca.fabs(den) > config.eps, r, from_quat(quat.product(to_quat(a), to_quat(b))))
    return shadow_if_necessary(r)


def to_dcm(r):
    assert r.shape == (3, 1)
    X = hat(r)
    n_sq = ca.dot(r, r)
    X_sq = ca.mtimes(X, X)
    return type(r).eye(3) + (8 * X_sq + 4 * (1 - n_sq) * X) / (1 + n_sq) ** 2


@convert.register_conversion(MrpRep, QuaternionRep)
def to_quat(r):
    assert r.shape == (3, 1)
    n_sq = ca.dot(r, r)
    den = 1 + n_sq
    return ca.vertcat((1 - n_sq) / den, 2 * r / den)


@convert.register_conversion(QuaternionRep, MrpRep)
def from_quat(q):
    assert q.shape == (4, 1)
    # pick the hemisphere with w >= 0, so |r| <= 1
    q = ca.if_else(q[0] < 0, -q, q)
    return q[1:] / (1 + q[0])


def from_dcm(R):
    return from_quat(quat.from_dcm(R))


@convert.register_conversion(MrpRep, RotationVectorRep)
def to_rotvec(r):
    assert r.shape == (3, 1)
    n = ca.norm_2(r)
    return ca.if_else(n > config.eps, 4 * ca.atan(n) / n, 4) * r


@convert.register_conversion(RotationVectorRep, MrpRep)
def from_rotvec(v):
    return from_quat(quat.from_rotvec(v))


convert.register_pivot(MrpRep, to_canonical=to_dcm, from_canonical=from_dcm)


class Mrp(SO3Base):
    """
    SO(3) element stored as modified Rodrigues parameters.
    """

    Rep = MrpRep

    def set_identity(self, S=None):
        self._rep_data = self._scalar_type(S).zeros(3, 1)

    def invert(self):
        self._rep_data = -self._rep_data

    def _multiply_inplace(self, other):
        self._rep_data = product(self._rep_data, other.get_coordinates(MrpRep))

    def shadow(self):
        """
        The shadow set, the same attitude with magnitude >= 1.
        """
        return shadow(self._rep_data)
