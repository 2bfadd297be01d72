"""
Interpolators of different dimensionality behind one interface.
"""

from ninterp import Extrapolate, Interp0D, Interp1D, Interp2D, Interpolator, Linear, Nearest


def main():
    interps: list[Interpolator] = [
        Interp0D(0.5),
        Interp1D([0.0, 1.0, 2.0], [0.0, 4.0, 8.0], strategy=Nearest(), extrapolate=Extrapolate.error()),
        Interp2D(
            [0.0, 1.0],
            [0.0, 1.0],
            [[2.0, 4.0], [4.0, 16.0]],
            strategy=Linear(),
            extrapolate=Extrapolate.enable(),
        ),
    ]
    points = [[], [1.75], [1.5, -0.5]]
    expected = [0.5, 8.0, -3.5]
    for interp, point, want in zip(interps, points, expected):
        got = interp.interpolate(point)
        print(f"{interp.ndim()}-D {point} -> {got}")
        assert got == want


if __name__ == "__main__":
    main()
