from dataclasses import dataclass
import math
from typing import Callable, Iterator, Tuple

from v2d.FloatUtils import FloatUtils


@dataclass(frozen=True, slots=True)
class Vector2D:
    """Immutable 2D vector.

    Every operation returns a new vector or a scalar, the receiver is never
    modified. Components are stored as given: nan and inf are accepted and
    propagate through the arithmetic with IEEE-754 semantics.

        v = vec2(2, 3)
        v.add(vec2(2, 3))    # Vector2D(x=4, y=6)
        v.sub(vec2(-1, -2))  # Vector2D(x=3, y=5)
    """
    x: float
    y: float

    def equals(self, other: "Vector2D") -> bool:
        """Exact component-wise comparison, no tolerance."""
        return self.x == other.x and self.y == other.y

    def add(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> "Vector2D":
        return Vector2D(self.x * s, self.y * s)

    def times(self, other: "Vector2D") -> "Vector2D":
        """Element-wise product: (x, y).times((p, q)) -> (x*p, y*q)."""
        return Vector2D(self.x * other.x, self.y * other.y)

    def apply(self, f: Callable[[float], float]) -> "Vector2D":
        """Map f over both components independently."""
        return Vector2D(f(self.x), f(self.y))

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def invert(self) -> "Vector2D":
        """Swap the components: (x, y) -> (y, x)."""
        return Vector2D(self.y, self.x)

    def abs(self) -> "Vector2D":
        return Vector2D(-self.x if self.x < 0 else self.x,
                        -self.y if self.y < 0 else self.y)

    def round(self, step: float) -> "Vector2D":
        """Round each component to the closest multiple of step.

        The lower candidate is c - fmod(c, step) and the upper one is a step
        above it. The lower one only wins when it is strictly closer, so an
        exact tie goes up: vec2(3, 5).round(10) is (0, 10).
        """
        return Vector2D(Vector2D._round_component(self.x, step),
                        Vector2D._round_component(self.y, step))

    @staticmethod
    def _round_component(c: float, step: float) -> float:
        low = c - FloatUtils.fmod(c, step)
        high = low + step
        return low if c - low < high - c else high

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def angle(self, other: "Vector2D") -> float:
        """Angle to other in radians, 0 when both vectors are equal.

        No clamping: a cosine pushed outside [-1, 1] by rounding error, or a
        zero length vector, gives nan.
        """
        if self.equals(other):
            return 0.0
        return FloatUtils.acos(FloatUtils.divide(self.dot(other), other.length() * self.length()))

    def middle(self, other: "Vector2D") -> "Vector2D":
        return self.add(other).scale(0.5)

    def dydx(self) -> float:
        """Slope y / x; a vertical vector gives +-inf, the zero vector nan."""
        return FloatUtils.divide(self.y, self.x)

    def x_sign(self) -> int:
        return -1 if self.x < 0 else 1 if self.x > 0 else 0

    def y_sign(self) -> int:
        return -1 if self.y < 0 else 1 if self.y > 0 else 0

    def params(self) -> Tuple[float, float]:
        """Components as a tuple, for APIs that take x and y positionally."""
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        # f(*v) works like f(*v.params())
        return iter(self.params())

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return self.add(other)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return self.sub(other)

    def __mul__(self, s: float) -> "Vector2D":
        return self.scale(s)

    __rmul__ = __mul__


def vec2(x: float, y: float) -> Vector2D:
    """Shorthand for Vector2D(x, y)."""
    return Vector2D(x, y)
