"""
Matrix value types.

Модули mat22, mat33, mat44 зависят только от векторного типа своей
размерности и никогда друг от друга.
"""

from graphmath.core.matrix import mat22, mat33, mat44
from graphmath.core.matrix.mat22 import Mat22
from graphmath.core.matrix.mat33 import Mat33
from graphmath.core.matrix.mat44 import Mat44

__all__ = [
    # Modules
    "mat22",
    "mat33",
    "mat44",
    # Models
    "Mat22",
    "Mat33",
    "Mat44",
]
