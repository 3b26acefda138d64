"""
A module for quaternions (Euler parameters).

This is a representation of SO(3). There are 4 parameters (w, x, y, z) and no singularities.
The product uses the Hamilton convention, so that Dcm(a*b) = Dcm(a)*Dcm(b).
q and -q represent the same rotation.
"""
import casadi as ca
import numpy as np
from scipy.spatial.transform import Rotation

from . import convert
from .base import SO3Base
from .traits import QuaternionRep, RotationVectorRep
from .. import config
from ..lie.util import C1, to_numpy


def product(a, b):
    assert a.shape == (4, 1)
    assert b.shape == (4, 1)
    r1 = a[0]
    v1 = a[1:]
    r2 = b[0]
    v2 = b[1:]
    return ca.vertcat(r1 * r2 - ca.dot(v1, v2), r1 * v2 + r2 * v1 + ca.cross(v1, v2))


def conjugate(q):
    assert q.shape == (4, 1)
    return ca.vertcat(q[0], -q[1:])


def to_dcm(q):
    """
    Converts a quaternion to a DCM.
    :param q: The quaternion.
    :return: The DCM.
    """
    assert q.shape == (4, 1)
    a = q[0]
    b = q[1]
    c = q[2]
    d = q[3]
    aa = a * a
    ab = a * b
    ac = a * c
    ad = a * d
    bb = b * b
    bc = b * c
    bd = b * d
    cc = c * c
    cd = c * d
    dd = d * d
    return ca.vertcat(
        ca.horzcat(aa + bb - cc - dd, 2 * (bc - ad), 2 * (bd + ac)),
        ca.horzcat(2 * (bc + ad), aa + cc - bb - dd, 2 * (cd - ab)),
        ca.horzcat(2 * (bd - ac), 2 * (cd + ab), aa + dd - bb - cc),
    )


def from_dcm(R):
    """
    Converts a direction cosine matrix to a quaternion.
    :param R: A direction cosine matrix.
    :return: The quaternion.
    """
    assert R.shape == (3, 3)
    b1 = 0.5 * ca.sqrt(1 + R[0, 0] + R[1, 1] + R[2, 2])
    b2 = 0.5 * ca.sqrt(1 + R[0, 0] - R[1, 1] - R[2, 2])
    b3 = 0.5 * ca.sqrt(1 - R[0, 0] + R[1, 1] - R[2, 2])
    b4 = 0.5 * ca.sqrt(1 - R[0, 0] - R[1, 1] + R[2, 2])

    q1 = ca.vertcat(
        b1,
        (R[2, 1] - R[1, 2]) / (4 * b1),
        (R[0, 2] - R[2, 0]) / (4 * b1),
        (R[1, 0] - R[0, 1]) / (4 * b1),
    )
    q2 = ca.vertcat(
        (R[2, 1] - R[1, 2]) / (4 * b2),
        b2,
        (R[0, 1] + R[1, 0]) / (4 * b2),
        (R[0, 2] + R[2, 0]) / (4 * b2),
    )
    q3 = ca.vertcat(
        (R[0, 2] - R[2, 0]) / (4 * b3),
        (R[0, 1] + R[1, 0]) / (4 * b3),
        b3,
        (R[1, 2] + R[2, 1]) / (4 * b3),
    )
    q4 = ca.vertcat(
        (R[1, 0] - R[0, 1]) / (4 * b4),
        (R[0, 2] + R[2, 0]) / (4 * b4),
        (R[1, 2] + R[2, 1]) / (4 * b4),
        b4,
    )

    return ca.if_else(
        ca.trace(R) > 0,
        q1,
        ca.if_else(
            ca.logic_and(R[0, 0] > R[1, 1], R[0, 0] > R[2, 2]),
            q2,
            ca.if_else(R[1, 1] > R[2, 2], q3, q4),
        ),
    )


@convert.register_conversion(RotationVectorRep, QuaternionRep)
def from_rotvec(v):
    """
    The exponential map, rotation vector to quaternion.
    """
    assert v.shape == (3, 1)
    theta = ca.norm_2(v)
    # sin(theta/2)/theta = C1(theta/2)/2
    return ca.vertcat(ca.cos(theta / 2), 0.5 * C1(theta / 2) * v)


@convert.register_conversion(QuaternionRep, RotationVectorRep)
def to_rotvec(q):
    """
    The logarithm map, quaternion to rotation vector with angle in [0, pi].
    """
    assert q.shape == (4, 1)
    q = ca.if_else(q[0] < 0, -q, q)
    n = ca.norm_2(q[1:])
    theta = 2 * ca.atan2(n, q[0])
    return ca.if_else(n > config.eps, theta / n, 2 / q[0]) * q[1:]


convert.register_pivot(QuaternionRep, to_canonical=to_dcm, from_canonical=from_dcm)


class Quat(SO3Base):
    """
    SO(3) element stored as a unit quaternion (w, x, y, z).
    """

    Rep = QuaternionRep

    def set_identity(self, S=None):
        self._rep_data = self._scalar_type(S)([1, 0, 0, 0])

    def invert(self):
        self._rep_data = conjugate(self._rep_data)

    def _multiply_inplace(self, other):
        self._rep_data = product(self._rep_data, other.get_coordinates(QuaternionRep))

    def _is_approx_same(self, other, tol):
        # q and -q are the same rotation
        p = to_numpy(self._rep_data)
        q = to_numpy(other.get_rep_data())
        d = min(np.linalg.norm(p - q), np.linalg.norm(p + q))
        return bool(d <= tol * min(np.linalg.norm(p), np.linalg.norm(q)))

    def set_random(self, rng=None):
        x, y, z, w = Rotation.random(None, rng).as_quat()
        self._rep_data = ca.DM([w, x, y, z])
