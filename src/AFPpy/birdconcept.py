"""
This module contains a container for the parameters of a bird, with which the
flight power and flight performance models may be queried conveniently.
"""
import warnings

from AFPpy import flightpower as fp
from AFPpy import flightperformance as fperf
from AFPpy.morphometrics import wingarea_from_linear

__all__ = ["BirdConcept"]
__author__ = "Yaseen Reza"


def get_default_concept_objects():
    """
    Create classes for storing and easy access to attributes of a bird.

    Returns:
        A tuple of classes for storing bird geometry and aerodynamic constants,
        respectively.

    """

    class BaseMethods:
        """Default methods to run on instantiation."""

        def __init__(self, dictionary: dict = None):
            """
            Args:
                dictionary: key-value pairs with which to update default args.
            """
            if dictionary is None:
                return

            for key, value in dictionary.items():

                # If the key points to an attribute of self, set the new value
                if key in self._annotations() or hasattr(self, key):
                    setattr(self, key, value)

                # The key didn't exist for self
                else:
                    errormsg = f"Unknown {key=} for {type(self).__name__}"
                    raise KeyError(errormsg)
            return

        @classmethod
        def _annotations(cls) -> dict:
            return getattr(cls, "__annotations__", {})

        def __getattr__(self, item):
            # If the item requested is supposed to exist for this object,
            # but hasn't yet been given a value - return this default value
            if item in self._annotations():
                warnmsg = f"Concept's '{item}' attribute is undefined"
                warnings.warn(warnmsg, RuntimeWarning, stacklevel=2)
                return None

            # Default behaviour
            return super().__getattribute__(item)

        def asdict(self) -> dict:
            """Return the defined attributes as keyword arguments."""
            with warnings.catch_warnings():
                warnings.simplefilter("ignore")
                return {key: getattr(self, key) for key in self._kwargnames}

    class BirdGeometry(BaseMethods):
        """Morphometrics of the bird."""
        mass_kg: float
        span_m: float
        wingarea_m2: float
        bodyarea_m2: float = None
        # Linear wing measurements, for when wing area is unavailable
        winglength_m: float
        secondarylength_m: float
        _kwargnames = ("mass_kg", "span_m", "wingarea_m2", "bodyarea_m2")

        def __init__(self, geometry: dict):
            """
            Given bird geometry, resolve the wing area if it is missing.

            Args:
                geometry: Bird geometry.
            """
            super().__init__(dictionary=geometry)

            # Skip the warnings from trying to access undefined attributes
            with warnings.catch_warnings():
                warnings.simplefilter("ignore")
                # Refactoring
                B = self.span_m
                S = self.wingarea_m2
                wl = self.winglength_m
                s1 = self.secondarylength_m

            notNone = lambda x: x is not None

            if notNone(S) and (notNone(wl) or notNone(s1)):
                errormsg = (
                    f"Wing area is overdefined. Consider removing either the "
                    f"wing area or the linear wing measurements"
                )
                raise ValueError(errormsg)

            if S is None:
                if all(map(notNone, [B, wl, s1])):
                    self.wingarea_m2 = wingarea_from_linear(
                        span_m=B, winglength_m=wl, secondarylength_m=s1)
                else:
                    warnmsg = (
                        f"Wing geometry is underdefined. Provide wing area, or "
                        f"span, wing length and first secondary length"
                    )
                    warnings.warn(warnmsg, RuntimeWarning, stacklevel=3)
            return

    class AerodynamicConstants(BaseMethods):
        """Constants of the flight power models."""
        k = fp.K_INDUCED
        Cbody = fp.CBODY
        Cpro = fp.CPRO
        rho_kgpm3 = fp.RHO_KGPM3
        g_mps2 = fp.G_MPS2
        _kwargnames = ("k", "Cbody", "Cpro", "rho_kgpm3", "g_mps2")

    return BirdGeometry, AerodynamicConstants


class BirdConcept:
    """
    Define a bird concept, from which its flight performance can be evaluated.

    Examples:

        >>> from AFPpy.birdconcept import BirdConcept
        >>> swallow = BirdConcept(
        ...     geometry={"mass_kg": 0.017, "span_m": 0.324,
        ...               "wingarea_m2": 0.014})
        >>> bestV_mps, bestLD = swallow.get_best_liftdrag(returnmode="both")

    """

    def __init__(self, geometry: dict = None, constants: dict = None):
        """
        Args:
            geometry: Definition of the bird's morphometrics. Optional, but a
                mass, span, and either a wing area or linear wing measurements
                must be given for most methods to work. Valid keys are:
                    "mass_kg": Total body mass, in kilograms.
                    "span_m": Wingspan, in metres.
                    "wingarea_m2": Total wing area, in metres squared.
                    "bodyarea_m2": Frontal area of the body, in metres squared.
                    "winglength_m": Length of a single closed wing, in metres.
                    "secondarylength_m": Length of the first secondary, in
                        metres.
            constants: Overrides of the model constants. Optional, valid keys
                are "k", "Cbody", "Cpro", "rho_kgpm3", and "g_mps2".

        Raises:
            KeyError: On unknown keys in geometry or constants.

        """
        BirdGeometry, AerodynamicConstants = get_default_concept_objects()

        self.geometry = BirdGeometry(geometry)
        self.constants = AerodynamicConstants(constants)

        return

    def __repr__(self):
        return f"{type(self).__name__}(geometry={self.geometry.asdict()})"

    @property
    def _kwargs(self) -> dict:
        return {**self.geometry.asdict(), **self.constants.asdict()}

    def _select(self, *names) -> dict:
        kwargs = self._kwargs
        return {key: kwargs[key] for key in names}

    def V_mp(self):
        """Closed-form minimum power speed, in metres per second."""
        kwargs = self._select(
            "mass_kg", "span_m", "bodyarea_m2", "Cbody", "k", "rho_kgpm3",
            "g_mps2")
        return fp.V_mp(**kwargs)

    def P_induced(self, airspeed_mps):
        """Induced power at the given airspeed, in Watts."""
        kwargs = self._select("mass_kg", "span_m", "k", "rho_kgpm3", "g_mps2")
        return fp.P_induced(airspeed_mps=airspeed_mps, **kwargs)

    def P_parasite(self, airspeed_mps):
        """Parasite power at the given airspeed, in Watts."""
        kwargs = self._select("mass_kg", "bodyarea_m2", "Cbody", "rho_kgpm3")
        return fp.P_parasite(airspeed_mps=airspeed_mps, **kwargs)

    def P_profile(self):
        """Profile power (independent of airspeed), in Watts."""
        return fp.P_profile(**self._kwargs)

    def P_mec(self, airspeed_mps=None):
        """
        Total mechanical power required for flight, in Watts.

        Args:
            airspeed_mps: True airspeed. Optional, defaults to the minimum
                power speed.

        """
        return fp.P_mec(airspeed_mps=airspeed_mps, **self._kwargs)

    def liftdrag(self, airspeed_mps=None):
        """
        Effective lift-to-drag ratio.

        Args:
            airspeed_mps: True airspeed. Optional, defaults to the minimum
                power speed.

        """
        return fp.liftdrag(airspeed_mps=airspeed_mps, **self._kwargs)

    def ultimate_liftdrag(self):
        """Ultimate lift-to-drag ratio, neglecting profile power."""
        kwargs = self._select("mass_kg", "span_m", "bodyarea_m2", "Cbody")
        return fp.ultimate_liftdrag(**kwargs)

    def get_bestV_mp(self, bounds=None):
        """Numerically optimised minimum power speed, in metres per second."""
        return fperf.get_bestV_mp(bounds=bounds, **self._kwargs)

    def get_bestV_mr(self, bounds=None):
        """Numerically optimised maximum range speed, in metres per second."""
        return fperf.get_bestV_mr(bounds=bounds, **self._kwargs)

    def get_best_liftdrag(self, returnmode: str = None):
        """Maximum lift-to-drag ratio, see flightperformance.get_best_liftdrag."""
        return fperf.get_best_liftdrag(returnmode=returnmode, **self._kwargs)
