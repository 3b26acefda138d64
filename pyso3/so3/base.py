import abc

import casadi as ca
import numpy as np
from scipy.spatial.transform import Rotation

from .. import config
from ..lie import algebra
from ..lie.util import as_expr, is_numeric, to_numpy
from . import convert, traits
from .traits import RotationVectorRep


def _is_approx(a, b, tol):
    # relative Frobenius closeness, symmetric in a and b
    a = to_numpy(a)
    b = to_numpy(b)
    return bool(np.linalg.norm(a - b) <= tol * min(np.linalg.norm(a), np.linalg.norm(b)))


class SO3Base(abc.ABC):
    """
    An element of SO(3), independent of how it is stored.

    Concrete classes set the class attribute Rep to a representation tag and
    implement set_identity, invert and _multiply_inplace. Everything else is
    written against that small capability set and the conversion engine, so
    generic algorithms never touch representation specific fields.

    The representation data must encode a valid rotation. This is a caller
    enforced invariant, checked only when config.check_preconditions is set.
    """

    dim = 3

    #: the representation tag, set by concrete classes
    Rep = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "Rep" not in cls.__dict__:
            return
        try:
            traits.rep_traits(cls.Rep)
        except KeyError as e:
            raise TypeError(str(e)) from e
        if not convert.has_pivot(cls.Rep):
            raise TypeError(
                "representation {} has no canonical conversions, "
                "register them before defining {}".format(cls.Rep.__name__, cls.__name__))
        traits.bind_element(cls.Rep, cls)

    def __init__(self, data=None):
        """
        :param data: None for the identity, another SO(3) element of any
            representation, or representation data (casadi DM/SX or array-like)
        """
        if data is None:
            self.set_identity()
        elif isinstance(data, SO3Base):
            self.assign(data)
        else:
            self.set_rep_data(data)

    def __repr__(self):
        return "{:s}({})".format(type(self).__name__, self._rep_data)

    @property
    def S(self):
        """The scalar type of the coefficients, casadi DM or SX."""
        return type(self._rep_data)

    def _scalar_type(self, S=None):
        if S is not None:
            return S
        data = getattr(self, "_rep_data", None)
        return ca.DM if data is None else type(data)

    def cast(self, S):
        """
        Copy of this element with data of scalar type S.
        :raises TypeError: casting symbolic data with free symbols to DM
        """
        data = self._rep_data
        if S is ca.DM and isinstance(data, ca.SX):
            data = ca.DM(to_numpy(data))
        res = type(self)()
        res._rep_data = S(data)
        return res

    # operators

    def assign(self, other):
        """
        Set this element from an element of any representation.
        """
        self._rep_data = convert.convert(other.get_rep_data(), other.Rep, self.Rep)
        return self

    def __mul__(self, other):
        if not isinstance(other, SO3Base):
            return NotImplemented
        res = type(self)(self)
        res *= other
        return res

    def __imul__(self, other):
        if not isinstance(other, SO3Base):
            return NotImplemented
        self._multiply_inplace(other)
        return self

    def __eq__(self, other):
        if not isinstance(other, SO3Base):
            return NotImplemented
        if self.Rep is other.Rep:
            a, b = self._rep_data, other._rep_data
        else:
            a, b = self.to_rotation_matrix(), other.to_rotation_matrix()
        return bool(np.array_equal(to_numpy(a), to_numpy(b)))

    def is_approx(self, other, tol=None):
        """
        Approximate equality. Elements of the same representation use that
        representation's metric, otherwise the rotation matrices are compared.
        """
        tol = config.default_tol if tol is None else tol
        if self.Rep is other.Rep:
            return self._is_approx_same(other, tol)
        return _is_approx(self.to_rotation_matrix(), other.to_rotation_matrix(), tol)

    def _is_approx_same(self, other, tol):
        return _is_approx(self.to_rotation_matrix(), other.to_rotation_matrix(), tol)

    # representation capabilities

    @abc.abstractmethod
    def set_identity(self, S=None):
        ...

    @abc.abstractmethod
    def invert(self):
        ...

    @abc.abstractmethod
    def _multiply_inplace(self, other):
        """
        Replace this element by self * other, other is of any representation.
        """
        ...

    def set_random(self, rng=None):
        """
        Set to a uniformly distributed random rotation.
        :param rng: None, a seed or a numpy Generator
        """
        self.from_rotation_matrix(ca.DM(Rotation.random(None, rng).as_matrix()))

    @classmethod
    def random(cls, rng=None):
        res = cls()
        res.set_random(rng)
        return res

    # group operations

    @classmethod
    def identity(cls, S=ca.DM):
        res = cls()
        res.set_identity(S)
        return res

    def is_identity(self, tol=None):
        return self.is_approx(type(self).identity(), tol)

    def get_inverse(self):
        """
        Return the inverse, this element is unchanged.
        """
        res = type(self)(self)
        res.invert()
        return res

    # lie group / lie algebra maps

    @classmethod
    def exp(cls, tangent):
        """
        The exponential map from so(3), given as a rotation vector, to the group.
        """
        v = as_expr(tangent)
        assert v.shape == (3, 1)
        return cls(convert.convert(v, RotationVectorRep, cls.Rep))

    def log(self):
        """
        The inverse exponential map, from the group to a rotation vector.
        """
        return convert.convert(self._rep_data, self.Rep, RotationVectorRep)

    @staticmethod
    def hat(v):
        return algebra.hat(v)

    @staticmethod
    def vee(X):
        return algebra.vee(X)

    # noinspection PyPep8Naming
    def Ad(self):
        """
        The adjoint of SO(3) acting on so(3), which is the rotation matrix.
        """
        return self.to_rotation_matrix()

    @staticmethod
    def ad(v):
        return algebra.hat(v)

    # representation conversions

    @classmethod
    def is_canonical(cls):
        return traits.is_canonical(cls.Rep)

    def canonical(self):
        """
        This element in the canonical representation, self if already canonical.
        """
        if self.is_canonical():
            return self
        return traits.element_type(traits.rep_traits(self.Rep).canonical)(self)

    def to_rotation_matrix(self):
        # the canonical representation is the rotation matrix
        return convert.convert_to_canonical(self._rep_data, self.Rep)

    def from_rotation_matrix(self, R):
        R = as_expr(R)
        assert R.shape == (3, 3)
        self.set_rep_data(convert.convert_from_canonical(R, self.Rep))

    def get_coordinates(self, rep_to):
        """
        The data of this rotation in another representation, self is unchanged.
        :param rep_to: a representation tag or an element class
        """
        if isinstance(rep_to, type) and issubclass(rep_to, SO3Base):
            rep_to = rep_to.Rep
        return convert.convert(self._rep_data, self.Rep, rep_to)

    def get_rep_data(self):
        """
        The raw data of the representation. The layout depends on the
        representation, so generic algorithms should not rely on it.
        """
        return self._rep_data

    def set_rep_data(self, data):
        data = as_expr(data)
        assert data.shape == traits.rep_traits(self.Rep).shape
        if config.check_preconditions:
            self._check_valid(data)
        self._rep_data = type(data)(data)

    def _check_valid(self, data):
        if not is_numeric(data):
            return
        R = to_numpy(convert.convert_to_canonical(data, self.Rep))
        tol = config.validity_tol
        if np.max(np.abs(R.T @ R - np.eye(3))) > tol or abs(np.linalg.det(R) - 1) > tol:
            raise ValueError("{:s} data does not encode a rotation:\n{}".format(
                type(self).__name__, to_numpy(data)))
