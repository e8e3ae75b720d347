# vecmath3

`vecmath3` provides `Vec3f`, a three-component vector of single-precision
floats with component-wise arithmetic. Every stored value and every result
is rounded to a 32-bit float. For example, adding two vectors whose
components are at the largest finite float32 gives infinity.

## Installation

```
pip install vecmath3
```

## Usage

```python
from vecmath3.vector3 import Vec3f

a = Vec3f(1.0, 2.0, 3.0)
b = Vec3f(0.5, 1.5, -1.0)

a + b          # Vec3f(1.5, 3.5, 2.0)
a - b          # component-wise difference
a * b          # component-wise product
a * 2.0        # scale by a scalar
2.0 * a        # the same, scalar on the left
a / b          # component-wise quotient
a / 4.0        # divide by a scalar
-a             # negation

a += b         # in-place forms: +=, -=, *=, /=
x, y, z = a    # vectors unpack into their components
a.x, a.y, a.z  # read components by name
a.x = 7.0      # or set them
```

Scalars may be any real number (`int`, `float`, and so on); they are
rounded to float32 before use. Components are returned as Python `float`.

### Construction

- `Vec3f()`: all components zero.
- `Vec3f(s)`: all three components set to the real number `s`.
- `Vec3f(x, y, z)`: each component given separately.
- `Vec3f(other)`: a copy of another vector.

Any other number or type of arguments raises `TypeError`.

### Equality

Vectors compare with `==` and `!=`. Besides `x`, `y` and `z`, each vector
carries a hidden fourth component that starts at zero and goes through
addition, subtraction, negation and multiplication, and through division
by a scalar. Equality compares all four. As a result:

- a NaN in any component makes a vector unequal to every vector, itself
  included;
- dividing a vector by the scalar `0`, or multiplying it by an infinite or
  NaN scalar, puts NaN into the hidden component, so the result compares
  unequal to everything even when `x`, `y` and `z` look ordinary.

Dividing one vector by another resets the hidden component to zero.

Vectors are mutable and therefore not hashable.

### Division

Division does not check for zero. Dividing by a zero component gives
infinity or NaN in that component, as in float arithmetic. NaN and infinite
values are not checked anywhere, and no floating-point warnings are raised.

## Scope

The package offers only the component-wise operations above. It has no
length, normalisation, dot or cross product, or distance functions, and no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```