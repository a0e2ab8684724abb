"""
This module contains tools for finding the airspeeds at which a bird's flight
is most economical, by numerically optimising the aerodynamic models of the
flightpower module over a bounded range of airspeeds.
"""
import typing
import warnings

from scipy import optimize

from AFPpy import flightpower as fp
from AFPpy.morphometrics import bodyarea_m2
from AFPpy.mtools4afp import DomainError, InvalidArgumentError

__all__ = [
    "optimise_airspeed", "get_bestV_mp", "get_bestV_mr", "get_best_liftdrag"]
__author__ = "Yaseen Reza"

# Default bracket of airspeeds to search, in metres per second
SEARCH_BOUNDS_MPS = (0.0, 50.0)
XATOL_MPS = 1e-5
MAXITER = 500
RETURNMODES = ("velocity", "lift_drag", "both")


def optimise_airspeed(f_obj: typing.Callable, bounds=None,
                      maximise: bool = None) -> tuple:
    """
    Find the airspeed within a bracket that minimises (or maximises) a function
    of airspeed alone, using a derivative-free bounded search (Brent's method,
    a hybrid of golden-section search and successive parabolic interpolation).

    Args:
        f_obj: Objective function, of the form f(airspeed_mps) -> float.
        bounds: Tuple of the (lower, upper) airspeeds to search between, in
            metres per second. Optional, defaults to (0, 50).
        maximise: Flags whether the objective should be maximised rather than
            minimised. Optional, defaults to False.

    Returns:
        Tuple of (the optimal airspeed, the objective at that airspeed).

    Raises:
        DomainError: If the bounds are not of the form 0 <= lower < upper.
        RuntimeError: If the search fails to converge.

    Notes:
        The objective is assumed unimodal over the bracket. Any exception raised
        by the objective is propagated to the caller as is.

    """
    # Recast as necessary
    bounds = SEARCH_BOUNDS_MPS if bounds is None else bounds
    maximise = False if maximise is None else maximise
    lower, upper = map(float, bounds)
    if not 0 <= lower < upper:
        errormsg = f"Search bounds must satisfy 0 <= lower < upper ({bounds=})"
        raise DomainError(errormsg)

    # Maximising f(V) is the same as: Minimise -1.0 * f(V)
    sign = -1.0 if maximise else 1.0
    result = optimize.minimize_scalar(
        lambda x: sign * f_obj(x), bounds=(lower, upper), method="bounded",
        options={"xatol": XATOL_MPS, "maxiter": MAXITER}
    )
    if not result.success:
        errormsg = f"Airspeed optimisation failed to converge: {result.message}"
        raise RuntimeError(errormsg)

    bestV_mps = float(result.x)
    bestf = sign * float(result.fun)

    # An optimum on the edge of the bracket is unlikely to be the true optimum
    margin = 1e3 * XATOL_MPS
    if bestV_mps - lower < margin or upper - bestV_mps < margin:
        warnmsg = (
            f"Optimal airspeed {bestV_mps:.3f} m/s lies on the edge of the "
            f"search bracket {bounds}, consider widening the bracket"
        )
        warnings.warn(warnmsg, RuntimeWarning, stacklevel=2)

    return bestV_mps, bestf


def _with_resolved_bodyarea(parameters: dict) -> dict:
    """Fix the body area once, so it isn't re-estimated every evaluation."""
    parameters = dict(parameters)
    if parameters.get("bodyarea_m2") is None \
            and parameters.get("mass_kg") is not None:
        parameters["bodyarea_m2"] = bodyarea_m2(parameters["mass_kg"])
    return parameters


def get_bestV_mp(bounds=None, **kwargs) -> float:
    """
    Numerically find the minimum power speed, the airspeed which minimises the
    total mechanical power required for flight.

    Args:
        bounds: Tuple of the (lower, upper) airspeeds to search between, in
            metres per second. Optional, defaults to (0, 50).
        **kwargs: Keyword arguments of flightpower.P_mec (less airspeed_mps),
            describing the bird and its environment.

    Returns:
        The minimum power speed, in metres per second.

    Notes:
        The result agrees closely with the closed-form flightpower.V_mp, as
        profile power is modelled as independent of airspeed.

    """
    parameters = _with_resolved_bodyarea(kwargs)

    def f_obj(airspeed_mps):
        return fp.P_mec(airspeed_mps=airspeed_mps, **parameters)

    bestV_mps, _ = optimise_airspeed(f_obj, bounds=bounds, maximise=False)

    return bestV_mps


def get_bestV_mr(bounds=None, **kwargs) -> float:
    """
    Numerically find the maximum range speed, the airspeed which maximises the
    effective lift-to-drag ratio (and hence the distance covered per unit of
    mechanical work).

    Args:
        bounds: Tuple of the (lower, upper) airspeeds to search between, in
            metres per second. Optional, defaults to (0, 50).
        **kwargs: Keyword arguments of flightpower.liftdrag (less
            airspeed_mps), describing the bird and its environment.

    Returns:
        The maximum range speed, in metres per second.

    """
    parameters = _with_resolved_bodyarea(kwargs)

    def f_obj(airspeed_mps):
        return fp.liftdrag(airspeed_mps=airspeed_mps, **parameters)

    bestV_mps, _ = optimise_airspeed(f_obj, bounds=bounds, maximise=True)

    return bestV_mps


def get_best_liftdrag(returnmode: str = None, **kwargs):
    """
    Find the maximum effective lift-to-drag ratio of a bird, searching
    airspeeds between 0 and 50 metres per second.

    Args:
        returnmode: Selects what is returned. Optional, defaults to "both".
            Valid choices are:
                "velocity": Return the airspeed of maximum lift-to-drag.
                "lift_drag": Return the maximum lift-to-drag ratio.
                "both": Return a tuple of (airspeed, lift-to-drag ratio).
        **kwargs: Keyword arguments of flightpower.liftdrag (less
            airspeed_mps), describing the bird and its environment.

    Returns:
        The airspeed in metres per second, the lift-to-drag ratio, or both, as
        selected by returnmode.

    Raises:
        InvalidArgumentError: On an unrecognised choice of returnmode.

    """
    # Recast as necessary
    returnmode = "both" if returnmode is None else returnmode
    if returnmode not in RETURNMODES:
        errormsg = (
            f"Invalid selection {returnmode=}. "
            f"Please select any one of {RETURNMODES}"
        )
        raise InvalidArgumentError(errormsg)

    parameters = _with_resolved_bodyarea(kwargs)

    def f_obj(airspeed_mps):
        return fp.liftdrag(airspeed_mps=airspeed_mps, **parameters)

    bestV_mps, bestLD = optimise_airspeed(
        f_obj, bounds=SEARCH_BOUNDS_MPS, maximise=True)

    if returnmode == "velocity":
        return bestV_mps
    elif returnmode == "lift_drag":
        return bestLD
    return bestV_mps, bestLD
