"""
This module contains the aerodynamic models of flapping flight, with which the
mechanical power required for a bird to fly may be estimated from its basic
morphometrics (body mass, wingspan, and total wing area).

The models are those of Pennycuick's "Modelling the Flying Bird," with the
slight modifications explained by Claramunt & Wright. Physical parameters such
as gravitational acceleration and air density take conventional default values,
but can be changed by the user.

All functions take keyword arguments only. Physical quantities can be given as
scalars or array-likes, which are broadcast against one another numpy-style.
"""
import numpy as np
from scipy import constants

from AFPpy.morphometrics import bodyarea_m2 as allometric_bodyarea_m2
from AFPpy.mtools4afp import recastasnpfloatarray, revert2scalar, \
    require_parameters, require_positive, require_nonnegative, DomainError

__all__ = [
    "V_mp", "P_induced", "P_parasite", "P_profile", "P_mec", "liftdrag",
    "ultimate_liftdrag"
]
__author__ = "Yaseen Reza"

# Default aerodynamic constants
K_INDUCED = 1.0  # Induced power factor
CBODY = 0.1  # Drag coefficient of the body
CPRO = 8.4  # Profile power constant
RHO_KGPM3 = 1.23  # Air density
G_MPS2 = constants.g

# Equal to (4 / 3 / pi) ** 0.25, where induced power is 3x parasite power
VMP_COEFFICIENT = 0.807


def _resolve_bodyarea(funcname, mass_kg, bodyarea_m2):
    """Return the body's frontal area, estimating it from mass if not given."""
    if bodyarea_m2 is not None:
        return recastasnpfloatarray(bodyarea_m2)
    require_parameters(funcname, mass_kg=mass_kg)
    return recastasnpfloatarray(allometric_bodyarea_m2(mass_kg))


@revert2scalar
def V_mp(*, mass_kg=None, span_m=None, bodyarea_m2=None, Cbody=CBODY,
         k=K_INDUCED, rho_kgpm3=RHO_KGPM3, g_mps2=G_MPS2):
    """
    Compute the minimum power speed, the airspeed at which the sum of induced
    and parasite power is smallest.

    Args:
        mass_kg: Total body mass, in kilograms.
        span_m: Wingspan, in metres.
        bodyarea_m2: Frontal area of the body, in metres squared. Optional,
            estimated from the body mass as 0.01 * mass_kg ** (2/3).
        Cbody: Drag coefficient of the body. Optional, defaults to 0.1.
        k: Induced power factor. Optional, defaults to 1.0.
        rho_kgpm3: Air density, in kilograms per metre cubed. Optional,
            defaults to 1.23.
        g_mps2: Gravitational acceleration, in metres per second squared.
            Optional, defaults to standard gravity.

    Returns:
        Minimum power speed, in metres per second.

    """
    require_parameters("V_mp", mass_kg=mass_kg, span_m=span_m)

    # Recast as necessary
    bodyarea_m2 = _resolve_bodyarea("V_mp", mass_kg, bodyarea_m2)
    mass_kg = recastasnpfloatarray(mass_kg)
    span_m = recastasnpfloatarray(span_m)
    require_positive(
        mass_kg=mass_kg, span_m=span_m, bodyarea_m2=bodyarea_m2, Cbody=Cbody,
        k=k, rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
    )

    weight_n = mass_kg * g_mps2
    dragarea_m2 = bodyarea_m2 * Cbody

    airspeed_mps = VMP_COEFFICIENT * k ** 0.25 * weight_n ** 0.5 / (
            (span_m * rho_kgpm3) ** 0.5 * dragarea_m2 ** 0.25)

    return airspeed_mps


@revert2scalar
def P_induced(*, airspeed_mps=None, mass_kg=None, span_m=None, k=K_INDUCED,
              rho_kgpm3=RHO_KGPM3, g_mps2=G_MPS2):
    """
    Compute the induced power, the power required to support the weight of the
    bird by accelerating air downwards through the actuator disc.

    Args:
        airspeed_mps: True airspeed, in metres per second.
        mass_kg: Total body mass, in kilograms.
        span_m: Wingspan, in metres.
        k: Induced power factor. Optional, defaults to 1.0.
        rho_kgpm3: Air density, in kilograms per metre cubed. Optional,
            defaults to 1.23.
        g_mps2: Gravitational acceleration, in metres per second squared.
            Optional, defaults to standard gravity.

    Returns:
        Induced power, in Watts.

    Raises:
        DomainError: If the airspeed is not strictly positive. The model tends
            to infinite power as airspeed tends to zero (hovering is not
            described by this model).

    """
    require_parameters(
        "P_induced", airspeed_mps=airspeed_mps, mass_kg=mass_kg, span_m=span_m)

    # Recast as necessary
    airspeed_mps = recastasnpfloatarray(airspeed_mps)
    mass_kg = recastasnpfloatarray(mass_kg)
    span_m = recastasnpfloatarray(span_m)
    if not (airspeed_mps > 0).all():
        errormsg = (
            f"Induced power is undefined for airspeeds <= 0 "
            f"(got {airspeed_mps=})"
        )
        raise DomainError(errormsg)
    require_positive(
        mass_kg=mass_kg, span_m=span_m, k=k, rho_kgpm3=rho_kgpm3,
        g_mps2=g_mps2
    )

    weight_n = mass_kg * g_mps2
    power_w = 2 * k * weight_n ** 2 / (
            airspeed_mps * np.pi * rho_kgpm3 * span_m ** 2)

    return power_w


@revert2scalar
def P_parasite(*, airspeed_mps=None, mass_kg=None, bodyarea_m2=None,
               Cbody=CBODY, rho_kgpm3=RHO_KGPM3):
    """
    Compute the parasite power, the power required to overcome the drag of the
    body (treated as a flat plate of area bodyarea_m2 * Cbody).

    Args:
        airspeed_mps: True airspeed, in metres per second.
        mass_kg: Total body mass, in kilograms. Only required if bodyarea_m2 is
            not given.
        bodyarea_m2: Frontal area of the body, in metres squared. Optional,
            estimated from the body mass as 0.01 * mass_kg ** (2/3).
        Cbody: Drag coefficient of the body. Optional, defaults to 0.1.
        rho_kgpm3: Air density, in kilograms per metre cubed. Optional,
            defaults to 1.23.

    Returns:
        Parasite power, in Watts. Zero for an airspeed of zero.

    """
    require_parameters("P_parasite", airspeed_mps=airspeed_mps)

    # Recast as necessary
    airspeed_mps = recastasnpfloatarray(airspeed_mps)
    bodyarea_m2 = _resolve_bodyarea("P_parasite", mass_kg, bodyarea_m2)
    require_nonnegative(airspeed_mps=airspeed_mps)
    require_positive(bodyarea_m2=bodyarea_m2, Cbody=Cbody, rho_kgpm3=rho_kgpm3)

    power_w = bodyarea_m2 * Cbody * rho_kgpm3 * airspeed_mps ** 3 / 2

    return power_w


@revert2scalar
def P_profile(*, mass_kg=None, wingarea_m2=None, span_m=None,
              bodyarea_m2=None, k=K_INDUCED, Cbody=CBODY, Cpro=CPRO,
              rho_kgpm3=RHO_KGPM3, g_mps2=G_MPS2):
    """
    Compute the profile power, the power required to overcome the drag of the
    wings that is not already accounted for as induced drag.

    Profile power is modelled as a fixed fraction of the induced and parasite
    power at the minimum power speed, scaled by the inverse of the aspect
    ratio (wingarea_m2 / span_m ** 2) and the profile power constant. It is
    therefore independent of airspeed.

    Args:
        mass_kg: Total body mass, in kilograms.
        wingarea_m2: Total wing area, in metres squared.
        span_m: Wingspan, in metres.
        bodyarea_m2: Frontal area of the body, in metres squared. Optional,
            estimated from the body mass as 0.01 * mass_kg ** (2/3).
        k: Induced power factor. Optional, defaults to 1.0.
        Cbody: Drag coefficient of the body. Optional, defaults to 0.1.
        Cpro: Profile power constant. Optional, defaults to 8.4.
        rho_kgpm3: Air density, in kilograms per metre cubed. Optional,
            defaults to 1.23.
        g_mps2: Gravitational acceleration, in metres per second squared.
            Optional, defaults to standard gravity.

    Returns:
        Profile power, in Watts.

    """
    require_parameters(
        "P_profile", mass_kg=mass_kg, wingarea_m2=wingarea_m2, span_m=span_m)

    # Recast as necessary
    bodyarea_m2 = _resolve_bodyarea("P_profile", mass_kg, bodyarea_m2)
    wingarea_m2 = recastasnpfloatarray(wingarea_m2)
    span_m = recastasnpfloatarray(span_m)
    require_positive(wingarea_m2=wingarea_m2)
    require_nonnegative(Cpro=Cpro)

    Vmp_mps = V_mp(
        mass_kg=mass_kg, span_m=span_m, bodyarea_m2=bodyarea_m2, Cbody=Cbody,
        k=k, rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
    )
    Pind_w = P_induced(
        airspeed_mps=Vmp_mps, mass_kg=mass_kg, span_m=span_m, k=k,
        rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
    )
    Ppar_w = P_parasite(
        airspeed_mps=Vmp_mps, bodyarea_m2=bodyarea_m2, Cbody=Cbody,
        rho_kgpm3=rho_kgpm3
    )

    power_w = (Pind_w + Ppar_w) * Cpro * wingarea_m2 / span_m ** 2

    return power_w


@revert2scalar
def P_mec(*, airspeed_mps=None, mass_kg=None, wingarea_m2=None, span_m=None,
          bodyarea_m2=None, k=K_INDUCED, Cbody=CBODY, Cpro=CPRO,
          rho_kgpm3=RHO_KGPM3, g_mps2=G_MPS2):
    """
    Compute the total mechanical power required for flight, the sum of the
    induced, parasite, and profile powers.

    Args:
        airspeed_mps: True airspeed, in metres per second. Optional, defaults
            to the minimum power speed (see V_mp).
        mass_kg: Total body mass, in kilograms.
        wingarea_m2: Total wing area, in metres squared.
        span_m: Wingspan, in metres.
        bodyarea_m2: Frontal area of the body, in metres squared. Optional,
            estimated from the body mass as 0.01 * mass_kg ** (2/3).
        k: Induced power factor. Optional, defaults to 1.0.
        Cbody: Drag coefficient of the body. Optional, defaults to 0.1.
        Cpro: Profile power constant. Optional, defaults to 8.4.
        rho_kgpm3: Air density, in kilograms per metre cubed. Optional,
            defaults to 1.23.
        g_mps2: Gravitational acceleration, in metres per second squared.
            Optional, defaults to standard gravity.

    Returns:
        Total mechanical power, in Watts.

    Examples:

        Power curve of the Eurasian wigeon (cf. Pennycuick, 2008, fig. 3.5):

        >>> import numpy as np
        >>> from AFPpy import flightpower as fp
        >>> speeds_mps = np.arange(8, 26)
        >>> powers_w = fp.P_mec(
        ...     airspeed_mps=speeds_mps, mass_kg=0.770, wingarea_m2=0.0829,
        ...     span_m=0.822)

    """
    require_parameters(
        "P_mec", mass_kg=mass_kg, wingarea_m2=wingarea_m2, span_m=span_m)

    bodyarea_m2 = _resolve_bodyarea("P_mec", mass_kg, bodyarea_m2)
    if airspeed_mps is None:
        airspeed_mps = V_mp(
            mass_kg=mass_kg, span_m=span_m, bodyarea_m2=bodyarea_m2,
            Cbody=Cbody, k=k, rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
        )

    Pind_w = P_induced(
        airspeed_mps=airspeed_mps, mass_kg=mass_kg, span_m=span_m, k=k,
        rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
    )
    Ppar_w = P_parasite(
        airspeed_mps=airspeed_mps, bodyarea_m2=bodyarea_m2, Cbody=Cbody,
        rho_kgpm3=rho_kgpm3
    )
    Ppro_w = P_profile(
        mass_kg=mass_kg, wingarea_m2=wingarea_m2, span_m=span_m,
        bodyarea_m2=bodyarea_m2, k=k, Cbody=Cbody, Cpro=Cpro,
        rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
    )

    return Pind_w + Ppar_w + Ppro_w


@revert2scalar
def liftdrag(*, airspeed_mps=None, mass_kg=None, wingarea_m2=None,
             span_m=None, bodyarea_m2=None, k=K_INDUCED, Cbody=CBODY,
             Cpro=CPRO, rho_kgpm3=RHO_KGPM3, g_mps2=G_MPS2):
    """
    Compute the effective lift-to-drag ratio, the ratio of the work done
    supporting the bird's weight to the mechanical power expended.

    Args:
        airspeed_mps: True airspeed, in metres per second. Optional, defaults
            to the minimum power speed (see V_mp).
        mass_kg: Total body mass, in kilograms.
        wingarea_m2: Total wing area, in metres squared.
        span_m: Wingspan, in metres.
        bodyarea_m2: Frontal area of the body, in metres squared. Optional,
            estimated from the body mass as 0.01 * mass_kg ** (2/3).
        k: Induced power factor. Optional, defaults to 1.0.
        Cbody: Drag coefficient of the body. Optional, defaults to 0.1.
        Cpro: Profile power constant. Optional, defaults to 8.4.
        rho_kgpm3: Air density, in kilograms per metre cubed. Optional,
            defaults to 1.23.
        g_mps2: Gravitational acceleration, in metres per second squared.
            Optional, defaults to standard gravity.

    Returns:
        Lift-to-drag ratio (dimensionless).

    Examples:

        Differences in flight efficiency among similar sized passerines:

        >>> from AFPpy import flightpower as fp
        >>> swallow = fp.liftdrag(mass_kg=0.017, span_m=0.324, wingarea_m2=0.014)
        >>> spinetail = fp.liftdrag(
        ...     mass_kg=0.0173, span_m=0.187, wingarea_m2=0.0087)
        >>> bool(swallow > spinetail)
        True

    """
    require_parameters(
        "liftdrag", mass_kg=mass_kg, wingarea_m2=wingarea_m2, span_m=span_m)

    bodyarea_m2 = _resolve_bodyarea("liftdrag", mass_kg, bodyarea_m2)
    if airspeed_mps is None:
        airspeed_mps = V_mp(
            mass_kg=mass_kg, span_m=span_m, bodyarea_m2=bodyarea_m2,
            Cbody=Cbody, k=k, rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
        )
    power_w = P_mec(
        airspeed_mps=airspeed_mps, mass_kg=mass_kg, wingarea_m2=wingarea_m2,
        span_m=span_m, bodyarea_m2=bodyarea_m2, k=k, Cbody=Cbody, Cpro=Cpro,
        rho_kgpm3=rho_kgpm3, g_mps2=g_mps2
    )

    # Recast as necessary
    weight_n = recastasnpfloatarray(mass_kg) * g_mps2
    airspeed_mps = recastasnpfloatarray(airspeed_mps)

    return weight_n * airspeed_mps / power_w


@revert2scalar
def ultimate_liftdrag(*, mass_kg=None, span_m=None, bodyarea_m2=None,
                      Cbody=CBODY):
    """
    Compute the ultimate lift-to-drag ratio, the idealised upper bound on the
    effective lift-to-drag ratio obtained by neglecting profile power.

    This is the square root of the ratio of the disc area (that of a circle
    with diameter equal to the wingspan) to the body drag area.

    Args:
        mass_kg: Total body mass, in kilograms. Only required if bodyarea_m2 is
            not given.
        span_m: Wingspan, in metres.
        bodyarea_m2: Frontal area of the body, in metres squared. Optional,
            estimated from the body mass as 0.01 * mass_kg ** (2/3).
        Cbody: Drag coefficient of the body. Optional, defaults to 0.1.

    Returns:
        Ultimate lift-to-drag ratio (dimensionless).

    Notes:
        The bound is exact for an induced power factor of k=1. The effective
        lift-to-drag ratio of a bird with k > 1 or non-zero profile power is
        always lower.

    """
    require_parameters("ultimate_liftdrag", span_m=span_m)

    # Recast as necessary
    bodyarea_m2 = _resolve_bodyarea("ultimate_liftdrag", mass_kg, bodyarea_m2)
    span_m = recastasnpfloatarray(span_m)
    require_positive(span_m=span_m, bodyarea_m2=bodyarea_m2, Cbody=Cbody)

    discarea_m2 = np.pi * span_m ** 2 / 4
    dragarea_m2 = bodyarea_m2 * Cbody

    return (discarea_m2 / dragarea_m2) ** 0.5
