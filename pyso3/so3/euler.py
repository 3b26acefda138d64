"""
A module for Body 321 Euler angles.

This is a representation of SO(3). There are 3 parameters (phi, theta, psi), and it is singular at
theta = +/- pi/2. The rotation matrix is R = Rz(psi) Ry(theta) Rx(phi).
"""
import casadi as ca

from . import convert
from .base import SO3Base
from .traits import EulerRep, QuaternionRep

gimbal_tol = 1e-15  # |R[2, 0]| above 1 - gimbal_tol is treated as gimbal lock


def to_dcm(e):
    assert e.shape == (3, 1)
    cphi = ca.cos(e[0])
    sphi = ca.sin(e[0])
    cth = ca.cos(e[1])
    sth = ca.sin(e[1])
    cpsi = ca.cos(e[2])
    spsi = ca.sin(e[2])
    return ca.vertcat(
        ca.horzcat(cth * cpsi, sphi * sth * cpsi - cphi * spsi, cphi * sth * cpsi + sphi * spsi),
        ca.horzcat(cth * spsi, sphi * sth * spsi + cphi * cpsi, cphi * sth * spsi - sphi * cpsi),
        ca.horzcat(-sth, sphi * cth, cphi * cth),
    )


def from_dcm(R):
    """
    Converts a DCM to Euler angles, theta in [-pi/2, pi/2].

    In gimbal lock only psi -/+ phi is determined, phi is set to zero.
    """
    assert R.shape == (3, 3)
    lock = ca.fabs(R[2, 0]) > 1 - gimbal_tol
    theta = ca.asin(ca.fmax(ca.fmin(-R[2, 0], 1), -1))
    phi = ca.if_else(lock, 0, ca.atan2(R[2, 1], R[2, 2]))
    psi = ca.if_else(lock, ca.atan2(-R[0, 1], R[1, 1]), ca.atan2(R[1, 0], R[0, 0]))
    return ca.vertcat(phi, theta, psi)


@convert.register_conversion(EulerRep, QuaternionRep)
def to_quat(e):
    assert e.shape == (3, 1)
    cosPhi_2 = ca.cos(e[0] / 2)
    cosTheta_2 = ca.cos(e[1] / 2)
    cosPsi_2 = ca.cos(e[2] / 2)
    sinPhi_2 = ca.sin(e[0] / 2)
    sinTheta_2 = ca.sin(e[1] / 2)
    sinPsi_2 = ca.sin(e[2] / 2)
    return ca.vertcat(
        cosPhi_2 * cosTheta_2 * cosPsi_2 + sinPhi_2 * sinTheta_2 * sinPsi_2,
        sinPhi_2 * cosTheta_2 * cosPsi_2 - cosPhi_2 * sinTheta_2 * sinPsi_2,
        cosPhi_2 * sinTheta_2 * cosPsi_2 + sinPhi_2 * cosTheta_2 * sinPsi_2,
        cosPhi_2 * cosTheta_2 * sinPsi_2 - sinPhi_2 * sinTheta_2 * cosPsi_2,
    )


convert.register_pivot(EulerRep, to_canonical=to_dcm, from_canonical=from_dcm)


class Euler(SO3Base):
    """
    SO(3) element stored as body 3-2-1 Euler angles (phi, theta, psi).
    """

    Rep = EulerRep

    def set_identity(self, S=None):
        self._rep_data = self._scalar_type(S).zeros(3, 1)

    def invert(self):
        self._rep_data = from_dcm(ca.transpose(self.to_rotation_matrix()))

    def _multiply_inplace(self, other):
        self._rep_data = from_dcm(ca.mtimes(self.to_rotation_matrix(), other.to_rotation_matrix()))
