"""
Plugging a user-defined strategy into a 2-D interpolator.

The strategy ignores the grid values and returns the product of the
point coordinates. It does not handle offsets outside [0, 1], so pairing
it with Extrapolate.ENABLE is rejected when the interpolator is built.
"""

import numpy as np

from ninterp import Extrapolate, IncompatibleExtrapolateError, Interp2D, Strategy


class Product(Strategy):
    allow_extrapolate = False

    def interpolate(self, point, brackets, data):
        return float(np.prod(point))


def main():
    x = np.array([0.0, 2.0, 4.0])
    y = np.array([0.0, 4.0, 8.0])
    f_xy = np.zeros((3, 3))

    interp = Interp2D(x, y, f_xy, strategy=Product(), extrapolate=Extrapolate.error())
    # 2 * 3 == 6
    assert interp.interpolate([2.0, 3.0]) == 6.0

    try:
        Interp2D(x, y, f_xy, strategy=Product(), extrapolate=Extrapolate.enable())
    except IncompatibleExtrapolateError as exc:
        print(f"rejected: {exc}")


if __name__ == "__main__":
    main()
