"""
This package contains a set of representations for SO(3). The 3D rotation Lie Group.

dcm: 9 parameters, no singularities, the canonical representation
quat: 4 parameters, no singularities
rotvec: 3 parameters, the coordinates of the Lie algebra so(3)
euler: 3 parameters, singularity at pitch = +/- pi/2
mrp: 3 parameters, singularity at rotation of 2*pi, but can be avoided using shadow set

Conversions between any two of them are routed by the convert module.
"""
from .traits import (
    SO3Representation,
    SO3CanonicalRep,
    RotationMatrixRep,
    QuaternionRep,
    RotationVectorRep,
    EulerRep,
    MrpRep,
    element_type,
)
from .base import SO3Base
from .dcm import Dcm
from .rotvec import AngleAxis
from .quat import Quat
from .euler import Euler
from .mrp import Mrp


# noinspection PyPep8Naming
def SO3(rep=SO3CanonicalRep):
    """
    The element class storing the given representation, e.g. SO3(QuaternionRep) is Quat.
    """
    return element_type(rep)
