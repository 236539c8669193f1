"""Type aliases for pyturnbull."""

from typing import TypeAlias
import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]

# Answer codes after normalization: 1 = yes, 0 = no, -1 = unrecognized
AnswerArray: TypeAlias = NDArray[np.int8]

# A (left, right) bid pair
Interval: TypeAlias = tuple[float, float]
