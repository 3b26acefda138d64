"""
Representation tags and the trait table.

A tag is a class used purely as a type level identifier. Each tag has
exactly one RepTraits record describing the shape of its data and the
canonical representation that conversions pivot through.
"""
from collections import namedtuple


class SO3Representation:
    """
    Base class of the representation tags.
    """

    def __init__(self):
        raise RuntimeError("this class is just for scoping, do not instantiate")


class RotationMatrixRep(SO3Representation):
    """Direction cosine matrix, 9 parameters, no singularities."""


class QuaternionRep(SO3Representation):
    """Unit quaternion (w, x, y, z), 4 parameters, double cover of SO(3)."""


class RotationVectorRep(SO3Representation):
    """Rotation vector, angle * axis. Also the coordinates of so(3)."""


class EulerRep(SO3Representation):
    """Body 3-2-1 Euler angles (phi, theta, psi), singular at theta = +/- pi/2."""


class MrpRep(SO3Representation):
    """Modified Rodrigues parameters, kept on the set with norm <= 1."""


SO3CanonicalRep = RotationMatrixRep


class RepTraits(namedtuple("RepTraits", ["rep", "shape", "canonical"])):
    __slots__ = ()

    @property
    def is_canonical(self):
        return self.canonical is self.rep


_traits = {}
_elements = {}


def register_traits(rep, shape, canonical=SO3CanonicalRep):
    assert issubclass(rep, SO3Representation)
    assert issubclass(canonical, SO3Representation)
    _traits[rep] = RepTraits(rep=rep, shape=tuple(shape), canonical=canonical)
    return _traits[rep]


def rep_traits(rep):
    try:
        return _traits[rep]
    except KeyError:
        raise KeyError("no traits registered for representation {}".format(
            getattr(rep, "__name__", rep))) from None


def bind_element(rep, cls):
    """
    Record the element class storing data of the given representation.
    """
    rep_traits(rep)
    _elements[rep] = cls


def element_type(rep):
    try:
        return _elements[rep]
    except KeyError:
        raise KeyError("no element class defined for representation {}".format(
            getattr(rep, "__name__", rep))) from None


def is_canonical(rep):
    return rep_traits(rep).is_canonical


# the trait table
register_traits(RotationMatrixRep, shape=(3, 3))
register_traits(QuaternionRep, shape=(4, 1))
register_traits(RotationVectorRep, shape=(3, 1))
register_traits(EulerRep, shape=(3, 1))
register_traits(MrpRep, shape=(3, 1))
