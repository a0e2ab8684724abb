"""
This module contains tools for estimating the morphometric quantities of a bird
that are not usually measured directly on specimens.
"""
import numpy as np

from AFPpy.mtools4afp import recastasnpfloatarray, require_positive, \
    revert2scalar, DomainError

__all__ = ["bodyarea_m2", "wingarea_from_linear"]
__author__ = "Yaseen Reza"


@revert2scalar
def bodyarea_m2(mass_kg):
    """
    Estimate the frontal area of a bird's body from its mass, using the
    allometric relation Abody = 0.01 * m ** (2/3).

    Args:
        mass_kg: Total body mass, in kilograms.

    Returns:
        Frontal area of the body, in metres squared.

    References:
        Pennycuick, C. J., "Modelling the Flying Bird," Academic Press, 2008.

    """
    mass_kg = recastasnpfloatarray(mass_kg)
    require_positive(mass_kg=mass_kg)
    return 0.01 * mass_kg ** (2 / 3)


@revert2scalar
def wingarea_from_linear(span_m, winglength_m, secondarylength_m):
    """
    Estimate the total wing area (both wings and the body strip between them)
    from linear measurements taken on a study skin.

    Each hand-wing is modelled as a quarter-ellipse-like element of area
    (winglength * secondary * pi / 4), and the remainder of the span as a
    rectangle of chord equal to the length of the first secondary feather.

    Args:
        span_m: Wingspan, in metres.
        winglength_m: Length of a single (closed) wing, in metres.
        secondarylength_m: Length of the first secondary feather, in metres.

    Returns:
        Estimated total wing area, in metres squared.

    Raises:
        DomainError: If the measurements are not positive, or if two wing
            lengths exceed the span.

    References:
        Claramunt, S., and Wright, N. A., "Using museum specimens to study
        flight and dispersal," in Webster, M. S. (ed.), "The Extended
        Specimen," Studies in Avian Biology, 2017.

    """
    # Recast as necessary
    span_m = recastasnpfloatarray(span_m)
    winglength_m = recastasnpfloatarray(winglength_m)
    secondarylength_m = recastasnpfloatarray(secondarylength_m)
    require_positive(
        span_m=span_m, winglength_m=winglength_m,
        secondarylength_m=secondarylength_m
    )

    bodywidth_m = span_m - 2 * winglength_m
    if (bodywidth_m < 0).any():
        errormsg = f"Two wing lengths exceed the span ({span_m=})"
        raise DomainError(errormsg)

    handwings_m2 = 2 * (winglength_m * secondarylength_m * np.pi / 4)
    return handwings_m2 + bodywidth_m * secondarylength_m
