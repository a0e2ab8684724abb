"""Unit tests for the flightpower module."""
import unittest

import numpy as np
from scipy import constants

from AFPpy import flightpower as fp
from AFPpy.mtools4afp import DomainError, MissingParameterError

# Eurasian wigeon (Anas penelope), Pennycuick (2008) fig. 3.5
WIGEON = {"mass_kg": 0.770, "span_m": 0.822, "wingarea_m2": 0.0829}
# Barn swallow (Hirundo rustica)
SWALLOW = {"mass_kg": 0.017, "span_m": 0.324, "wingarea_m2": 0.014}


class TestPowerComponents(unittest.TestCase):
    """Tests for the individual induced, parasite, and profile powers."""

    def test_V_mp_default_bodyarea(self):
        """Omitting body area should match the allometric estimate."""
        m, B = WIGEON["mass_kg"], WIGEON["span_m"]
        Vmp_default = fp.V_mp(mass_kg=m, span_m=B)
        Vmp_explicit = fp.V_mp(mass_kg=m, span_m=B, bodyarea_m2=0.01 * m ** (2 / 3))
        self.assertAlmostEqual(Vmp_default, Vmp_explicit, places=12)
        self.assertAlmostEqual(Vmp_default, 12.95, delta=0.01)
        return

    def test_V_mp_balances_power(self):
        """At minimum power speed, induced power is ~3x parasite power."""
        Vmp = fp.V_mp(mass_kg=WIGEON["mass_kg"], span_m=WIGEON["span_m"])
        Pind = fp.P_induced(
            airspeed_mps=Vmp, mass_kg=WIGEON["mass_kg"], span_m=WIGEON["span_m"])
        Ppar = fp.P_parasite(airspeed_mps=Vmp, mass_kg=WIGEON["mass_kg"])
        self.assertAlmostEqual(Pind / Ppar, 3.0, delta=1e-2)
        return

    def test_V_mp_induced_factor(self):
        """Minimum power speed scales with the fourth root of k."""
        Vmp1 = fp.V_mp(mass_kg=1.0, span_m=1.0)
        Vmp16 = fp.V_mp(mass_kg=1.0, span_m=1.0, k=16.0)
        self.assertAlmostEqual(Vmp16 / Vmp1, 2.0, places=12)
        return

    def test_induced(self):
        Pind = fp.P_induced(airspeed_mps=10.0, mass_kg=1.0, span_m=1.0)
        gold = 2 * constants.g ** 2 / (10.0 * np.pi * 1.23)
        self.assertAlmostEqual(Pind, gold, places=12)
        return

    def test_induced_zero_airspeed(self):
        """Induced power is undefined at, or below, zero airspeed."""
        for airspeed_mps in [0.0, -1.0, [5.0, 0.0, 10.0]]:
            with self.assertRaises(DomainError):
                fp.P_induced(airspeed_mps=airspeed_mps, mass_kg=1.0, span_m=1.0)
        return

    def test_parasite(self):
        Ppar = fp.P_parasite(airspeed_mps=10.0, bodyarea_m2=0.01, Cbody=0.1)
        self.assertAlmostEqual(Ppar, 0.01 * 0.1 * 1.23 * 1000 / 2, places=12)

        # Parasite power vanishes when at rest, but is undefined for V < 0
        self.assertEqual(fp.P_parasite(airspeed_mps=0.0, mass_kg=1.0), 0.0)
        with self.assertRaises(DomainError):
            fp.P_parasite(airspeed_mps=-1.0, mass_kg=1.0)
        return

    def test_profile_independent_of_airspeed(self):
        Ppro = fp.P_profile(**WIGEON)
        for airspeed_mps in [8.0, 15.0, 25.0]:
            Pmec = fp.P_mec(airspeed_mps=airspeed_mps, **WIGEON)
            Pind = fp.P_induced(
                airspeed_mps=airspeed_mps, mass_kg=WIGEON["mass_kg"],
                span_m=WIGEON["span_m"])
            Ppar = fp.P_parasite(
                airspeed_mps=airspeed_mps, mass_kg=WIGEON["mass_kg"])
            self.assertAlmostEqual(Pmec - Pind - Ppar, Ppro, places=10)
        return

    def test_profile_scaling(self):
        """Profile power is proportional to the profile power constant."""
        Ppro = fp.P_profile(**WIGEON)
        Ppro_double = fp.P_profile(Cpro=2 * fp.CPRO, **WIGEON)
        self.assertAlmostEqual(Ppro_double / Ppro, 2.0, places=12)
        self.assertEqual(fp.P_profile(Cpro=0.0, **WIGEON), 0.0)
        return


class TestTotalPower(unittest.TestCase):
    """Tests for the total power and lift-to-drag models."""

    def test_default_airspeed(self):
        """Omitting airspeed must equal passing the minimum power speed."""
        Vmp = fp.V_mp(mass_kg=SWALLOW["mass_kg"], span_m=SWALLOW["span_m"])
        self.assertEqual(fp.P_mec(**SWALLOW), fp.P_mec(airspeed_mps=Vmp, **SWALLOW))
        self.assertEqual(
            fp.liftdrag(**SWALLOW), fp.liftdrag(airspeed_mps=Vmp, **SWALLOW))
        return

    def test_repeatable(self):
        results = [fp.liftdrag(airspeed_mps=9.0, **SWALLOW) for _ in range(3)]
        self.assertEqual(len(set(results)), 1)
        return

    def test_minimum_power(self):
        """No airspeed in the search range should need less than V_mp."""
        Vmp = fp.V_mp(mass_kg=WIGEON["mass_kg"], span_m=WIGEON["span_m"])
        Pmin = fp.P_mec(airspeed_mps=Vmp, **WIGEON)
        powers = fp.P_mec(airspeed_mps=np.linspace(0.5, 50, 200), **WIGEON)
        self.assertTrue((Pmin <= powers * (1 + 1e-6)).all())
        return

    def test_wigeon_power_curve(self):
        """
        References:
            Pennycuick, C. J., "Modelling the Flying Bird," Academic Press,
            2008. Figure 3.5.

        """
        speeds_mps = np.arange(8, 26)
        powers_w = fp.P_mec(airspeed_mps=speeds_mps, **WIGEON)
        self.assertEqual(powers_w.shape, speeds_mps.shape)

        # The curve should fall, reach its minimum close to V_mp, then rise
        imin = np.argmin(powers_w)
        self.assertTrue((np.diff(powers_w[:imin + 1]) < 0).all())
        self.assertTrue((np.diff(powers_w[imin:]) > 0).all())
        Vmp = fp.V_mp(mass_kg=WIGEON["mass_kg"], span_m=WIGEON["span_m"])
        self.assertLess(abs(speeds_mps[imin] - Vmp), 0.5)
        return

    def test_barn_swallow_liftdrag(self):
        LD = fp.liftdrag(**SWALLOW)
        self.assertAlmostEqual(LD, 14.42, delta=0.01)

        # Rederive from the component formulas
        m, B, S = SWALLOW["mass_kg"], SWALLOW["span_m"], SWALLOW["wingarea_m2"]
        W = m * constants.g
        A = 0.01 * m ** (2 / 3) * 0.1
        V = 0.807 * W ** 0.5 / ((B * 1.23) ** 0.5 * A ** 0.25)
        Pind = 2 * W ** 2 / (V * np.pi * 1.23 * B ** 2)
        Ppar = A * 1.23 * V ** 3 / 2
        Ppro = (Pind + Ppar) * 8.4 * S / B ** 2
        self.assertAlmostEqual(LD, W * V / (Pind + Ppar + Ppro), places=9)
        return

    def test_swallow_outperforms_spinetail(self):
        """Long-winged aerial insectivores fly more efficiently."""
        spinetail = {"mass_kg": 0.0173, "span_m": 0.187, "wingarea_m2": 0.0087}
        self.assertGreater(fp.liftdrag(**SWALLOW), fp.liftdrag(**spinetail))
        return

    def test_ultimate_liftdrag(self):
        m, B = SWALLOW["mass_kg"], SWALLOW["span_m"]
        ULD = fp.ultimate_liftdrag(mass_kg=m, span_m=B)
        self.assertAlmostEqual(ULD, 35.31, delta=0.01)

        # Ultimate lift-to-drag bounds the effective lift-to-drag ratio
        LD = fp.liftdrag(airspeed_mps=np.linspace(1, 40, 40), **SWALLOW)
        self.assertTrue((LD <= ULD).all())
        return


class TestBadParameters(unittest.TestCase):

    def test_missing(self):
        with self.assertRaises(MissingParameterError):
            fp.V_mp(span_m=1.0)
        with self.assertRaises(MissingParameterError):
            fp.P_mec(mass_kg=0.770, span_m=0.822)
        with self.assertRaises(MissingParameterError):
            fp.P_parasite(airspeed_mps=10.0)
        with self.assertRaises(TypeError):
            fp.liftdrag(span_m=0.822, wingarea_m2=0.0829)
        return

    def test_domain(self):
        with self.assertRaises(DomainError):
            fp.V_mp(mass_kg=1.0, span_m=0.0)
        with self.assertRaises(DomainError):
            fp.V_mp(mass_kg=1.0, span_m=1.0, rho_kgpm3=-1.23)
        with self.assertRaises(DomainError):
            fp.P_mec(mass_kg=float("nan"), span_m=1.0, wingarea_m2=0.1)
        with self.assertRaises(ValueError):
            fp.ultimate_liftdrag(mass_kg=1.0, span_m=1.0, Cbody=0.0)
        return


if __name__ == '__main__':
    unittest.main()
