"""
Conversion engine between SO(3) representations.

Every representation registers the two legs to and from its canonical
representation. A direct rule may be registered for any pair, and is
preferred when present. Any other pair pivots through the canonical
representation, so a conversion takes at most two steps.
"""
import functools
import logging

from . import traits

logger = logging.getLogger(__name__)

_to_canonical = {}
_from_canonical = {}
_direct = {}


def _copy(data):
    return type(data)(data)


def _name(rep):
    return getattr(rep, "__name__", repr(rep))


def register_pivot(rep, to_canonical, from_canonical):
    """
    Register the conversions between rep and its canonical representation.
    :param rep: the representation tag
    :param to_canonical: function mapping rep data to canonical data
    :param from_canonical: function mapping canonical data to rep data
    """
    traits.rep_traits(rep)
    _to_canonical[rep] = to_canonical
    _from_canonical[rep] = from_canonical
    route.cache_clear()
    logger.debug("registered canonical pivot for %s", _name(rep))


def register_conversion(rep_from, rep_to):
    """
    Decorator registering a direct conversion rule from rep_from to rep_to.
    """
    traits.rep_traits(rep_from)
    traits.rep_traits(rep_to)

    def decorator(f):
        _direct[(rep_from, rep_to)] = f
        route.cache_clear()
        logger.debug("registered direct conversion %s -> %s", _name(rep_from), _name(rep_to))
        return f

    return decorator


def has_pivot(rep):
    return rep in _to_canonical and rep in _from_canonical


def _leg(table, rep, direction):
    try:
        return table[rep]
    except KeyError:
        raise KeyError("no conversion {} canonical registered for {}".format(
            direction, _name(rep))) from None


@functools.lru_cache(maxsize=None)
def route(rep_from, rep_to):
    """
    The chain of conversion functions taking rep_from data to rep_to data.
    :return: tuple of one or two functions
    :raises KeyError: if either representation is not wired into the tables
    """
    src = traits.rep_traits(rep_from)
    dst = traits.rep_traits(rep_to)
    if rep_from is rep_to:
        steps = (_copy,)
        kind = "copy"
    elif (rep_from, rep_to) in _direct:
        steps = (_direct[(rep_from, rep_to)],)
        kind = "direct"
    else:
        if src.canonical is not dst.canonical:
            raise KeyError("{} and {} do not share a canonical representation".format(
                _name(rep_from), _name(rep_to)))
        if src.is_canonical:
            steps = (_leg(_from_canonical, rep_to, "from"),)
        elif dst.is_canonical:
            steps = (_leg(_to_canonical, rep_from, "to"),)
        else:
            steps = (
                _leg(_to_canonical, rep_from, "to"),
                _leg(_from_canonical, rep_to, "from"),
            )
        kind = "pivot"
    logger.debug("conversion route %s -> %s: %s, %d step(s)",
                 _name(rep_from), _name(rep_to), kind, len(steps))
    return steps


def convert(data, rep_from, rep_to):
    """
    Convert representation data, the input is never modified.
    """
    for f in route(rep_from, rep_to):
        data = f(data)
    return data


def convert_to_canonical(data, rep):
    if traits.is_canonical(rep):
        return _copy(data)
    return _leg(_to_canonical, rep, "to")(data)


def convert_from_canonical(data, rep):
    if traits.is_canonical(rep):
        return _copy(data)
    return _leg(_from_canonical, rep, "from")(data)
