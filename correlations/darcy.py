"""
Darcy friction factor correlations for pipe flow.

Every correlation maps relative roughness (e/D) and Reynolds number to the
Darcy friction factor. Below Re = 4000 all of them return the laminar
Hagen-Poiseuille value 64/Re. Above it each applies its own turbulent formula.

The functions never validate their inputs and never enforce the validity
ranges quoted in their docstrings; that is the dispatcher's job
(see correlations.dispatch).
"""

import logging
import math
from typing import NamedTuple

from utils.constants import (
    COLEBROOK_INITIAL_GUESS, COLEBROOK_MAX_ITERATIONS, COLEBROOK_TOLERANCE,
    LAMINAR_COEFFICIENT, LAMINAR_OVERRIDE_RE
)

logger = logging.getLogger("friction-mcp.darcy")

LN10 = math.log(10)


class ColebrookSolution(NamedTuple):
    """Outcome of the Colebrook fixed-point iteration."""
    friction_factor: float
    iterations: int
    converged: bool


def _laminar(reynolds_number: float) -> float:
    return LAMINAR_COEFFICIENT / reynolds_number


def swamee_jain(relative_roughness: float, reynolds_number: float) -> float:
    """Swamee-Jain correlation (1976).

    f = 0.25 / [log10(e/D/3.7 + 5.74/Re^0.9)]^2

    Valid for 5000 < Re < 1e8 and 1e-6 < e/D < 1e-2, accuracy ±1%.

    Args:
        relative_roughness: Relative roughness e/D
        reynolds_number: Reynolds number

    Returns:
        Darcy friction factor
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return _laminar(reynolds_number)

    term = math.log10(relative_roughness / 3.7 + 5.74 / reynolds_number ** 0.9)
    return 0.25 / term ** 2


def colebrook_solve(relative_roughness: float, reynolds_number: float) -> ColebrookSolution:
    """Solve the Colebrook-White equation (1939) by fixed-point iteration.

    Starting from f = 0.02 the update

        f_new = 0.25 / [log10(e/D/3.7 + 2.51/(Re*sqrt(f)))]^2

    is applied until two successive estimates differ by less than 1e-10, or
    until 100 iterations have been spent. Hitting the cap is not an error:
    the last estimate is returned with ``converged=False``.

    Args:
        relative_roughness: Relative roughness e/D
        reynolds_number: Reynolds number

    Returns:
        ColebrookSolution with the friction factor, iterations used and
        whether the tolerance was met
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return ColebrookSolution(_laminar(reynolds_number), 0, True)

    f = COLEBROOK_INITIAL_GUESS
    iterations = 0

    while iterations < COLEBROOK_MAX_ITERATIONS:
        term = relative_roughness / 3.7 + 2.51 / (reynolds_number * math.sqrt(f))
        f_new = 0.25 / math.log10(term) ** 2
        iterations += 1

        if abs(f_new - f) < COLEBROOK_TOLERANCE:
            return ColebrookSolution(f_new, iterations, True)

        f = f_new

    logger.debug(
        "Colebrook did not converge in %d iterations (e/D=%g, Re=%g); returning last estimate %g",
        COLEBROOK_MAX_ITERATIONS, relative_roughness, reynolds_number, f
    )
    return ColebrookSolution(f, iterations, False)


def colebrook(relative_roughness: float, reynolds_number: float) -> float:
    """Colebrook-White equation (1939), solved iteratively.

    The reference standard the explicit correlations approximate.
    See colebrook_solve for the iteration details.
    """
    return colebrook_solve(relative_roughness, reynolds_number).friction_factor


def haaland(relative_roughness: float, reynolds_number: float) -> float:
    """Haaland correlation (1983).

    f = [-1.8 * log10((e/D/3.7)^1.11 + 6.9/Re)]^-2

    Valid for 4000 < Re < 1e8 and 1e-6 < e/D < 5e-2.
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return _laminar(reynolds_number)

    term1 = (relative_roughness / 3.7) ** 1.11
    term2 = 6.9 / reynolds_number
    return (-1.8 * math.log10(term1 + term2)) ** -2


def chen(relative_roughness: float, reynolds_number: float) -> float:
    """Chen correlation (1979), nested logarithm form.

    Valid for 4000 < Re < 4e8 and 1e-7 < e/D < 5e-2.
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return _laminar(reynolds_number)

    inner = math.log10(
        (relative_roughness / 2.8257) ** 1.1098
        + (5.8506 / reynolds_number) ** 0.8981
    )
    A = math.log10(relative_roughness / 3.7065 - 5.0452 / reynolds_number * inner)
    return (-2 * A) ** -2


def zigrang_sylvester(relative_roughness: float, reynolds_number: float) -> float:
    """Zigrang-Sylvester correlation (1982), two-step explicit form.

    Valid for 4000 < Re < 1e8 and 4e-5 < e/D < 5e-2.
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return _laminar(reynolds_number)

    rr = relative_roughness / 3.7
    A = -0.8686 * math.log10(rr + 5.74 / reynolds_number ** 0.9)
    B = A - 0.8686 * math.log10(rr + 2.51 * A / reynolds_number)
    return (A - (A ** 2 - B) / (2 * A - B)) ** -2


def goudar_sonnad(relative_roughness: float, reynolds_number: float) -> float:
    """Goudar-Sonnad correlation (2008).

    Closed-form asymptotic expansion built from the intermediates
    a, b, d, s, q, g, z and the correction terms dLA and dCF.

    Valid for 4000 < Re < 1e8 and 1e-6 < e/D < 5e-2.
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return _laminar(reynolds_number)

    a = 2 / LN10
    b = relative_roughness / 3.7
    d = LN10 / 5.02 * reynolds_number
    s = b * d + math.log(d)
    q = s ** (s / (s + 1))
    g = b * d + math.log(d / q)
    z = math.log(q / g)
    dLA = g / (g + 1) * z
    dCF = dLA * (1 + z / 2 / (g + 1) ** 2)
    return a * (math.log(d / q) + dCF) ** -2


def serghides(relative_roughness: float, reynolds_number: float) -> float:
    """Serghides correlation (1984), three-step explicit method.

    Steffensen acceleration of the Colebrook iteration:
    f = [A - (B - A)^2 / (C - 2B + A)]^-2
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return _laminar(reynolds_number)

    rr = relative_roughness / 3.7
    A = -2 * math.log10(rr + 12 / reynolds_number)
    B = -2 * math.log10(rr + 2.51 * A / reynolds_number)
    C = -2 * math.log10(rr + 2.51 * B / reynolds_number)
    return (A - (B - A) ** 2 / (C - 2 * B + A)) ** -2


def wood(relative_roughness: float, reynolds_number: float) -> float:
    """Wood correlation (1966). Simple and fast, less accurate.

    f = 0.094(e/D)^0.225 + 0.53(e/D) + 88(e/D)^0.44 * Re^(-1.62(e/D)^0.134)
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return _laminar(reynolds_number)

    eD = relative_roughness
    return (0.094 * eD ** 0.225 + 0.53 * eD
            + 88 * eD ** 0.44 * reynolds_number ** (-1.62 * eD ** 0.134))
