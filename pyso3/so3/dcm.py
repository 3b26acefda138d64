"""
A module for Direction Cosine Matrices (DCMs).

This is the canonical representation of SO(3). There are 9 parameters and no singularities.
"""
import casadi as ca
from scipy.spatial.transform import Rotation

from . import convert
from .base import SO3Base
from .traits import RotationMatrixRep


def _copy(R):
    return type(R)(R)


convert.register_pivot(RotationMatrixRep, to_canonical=_copy, from_canonical=_copy)


class Dcm(SO3Base):
    """
    SO(3) element stored as a 3x3 rotation matrix.
    """

    Rep = RotationMatrixRep

    def set_identity(self, S=None):
        self._rep_data = self._scalar_type(S).eye(3)

    def invert(self):
        self._rep_data = ca.transpose(self._rep_data)

    def _multiply_inplace(self, other):
        self._rep_data = ca.mtimes(self._rep_data, other.to_rotation_matrix())

    def set_random(self, rng=None):
        self._rep_data = ca.DM(Rotation.random(None, rng).as_matrix())
