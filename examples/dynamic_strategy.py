"""
Swapping the strategy of an existing interpolator.
"""

from ninterp import Extrapolate, Interp1D, Linear, Nearest


def main():
    interp = Interp1D([0.0, 1.0, 2.0], [0.0, 3.0, 6.0], strategy=Linear(), extrapolate=Extrapolate.error())
    assert interp.interpolate([1.75]) == 5.25

    interp.set_strategy(Nearest())
    assert interp.interpolate([1.75]) == 6.0

    # tags work too
    interp.set_strategy("left_nearest")
    assert interp.interpolate([1.75]) == 3.0


if __name__ == "__main__":
    main()
