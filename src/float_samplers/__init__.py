"""Overflow-safe uniform sampling of floating-point values from bounded intervals."""

from .config import SamplingConfig as SamplingConfig
from .math import F32 as F32
from .math import F64 as F64
from .math import FloatBounds as FloatBounds
from .math import FloatPrecision as FloatPrecision
from .math import UniformFloatSampler as UniformFloatSampler
from .math import ValueLattice as ValueLattice
from .math import predecessor as predecessor
from .math import ulp as ulp
from .precision import F32U as F32U
from .precision import F64U as F64U
from .precision import Uniform as Uniform
