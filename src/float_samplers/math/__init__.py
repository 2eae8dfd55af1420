"""Import definitions relating to floating-point bits, value lattices, and uniform sampling."""

from .float_bits import F32 as F32
from .float_bits import F64 as F64
from .float_bits import FloatPrecision as FloatPrecision
from .float_bits import precision_from_name as precision_from_name
from .float_bits import predecessor as predecessor
from .float_bits import ulp as ulp
from .intervals import FloatBounds as FloatBounds
from .lattice import ValueLattice as ValueLattice
from .sampling import IntegerUniform as IntegerUniform
from .sampling import NumpyIntegerUniform as NumpyIntegerUniform
from .sampling import UniformFloatSampler as UniformFloatSampler
