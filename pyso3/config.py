"""
Package wide settings. Values are read at call time, so they may be changed
after import, e.g. ``pyso3.config.check_preconditions = True``.
"""

default_tol = 1e-6  # default tolerance for is_approx and is_identity

eps = 1e-7  # to avoid divide by zero

# validate representation data and skew-symmetric input, raising ValueError,
# this costs a numeric evaluation per call so it is off by default
check_preconditions = False

validity_tol = 1e-6  # tolerance used by the precondition checks
