"""
Lie algebra helpers for SO(3).

algebra: hat and vee maps between 3-vectors and skew-symmetric matrices
util: taylor series coefficient functions and numeric evaluation helpers
"""
