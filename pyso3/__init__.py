"""
Representation agnostic SO(3), the 3D rotation Lie group.

Rotations may be stored as direction cosine matrices, quaternions,
rotation vectors, Euler angles or modified Rodrigues parameters, and all
of them share one algebraic interface (see pyso3.so3.base.SO3Base).
"""
import logging

from .so3 import (
    SO3,
    SO3Base,
    SO3Representation,
    SO3CanonicalRep,
    RotationMatrixRep,
    QuaternionRep,
    RotationVectorRep,
    EulerRep,
    MrpRep,
    Dcm,
    Quat,
    AngleAxis,
    Euler,
    Mrp,
)
from .lie.algebra import hat, vee

logging.getLogger(__name__).addHandler(logging.NullHandler())
