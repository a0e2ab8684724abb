"""Bird concepts of real species, for use in examples and tests."""
from AFPpy.birdconcept import BirdConcept


def Barn_Swallow():
    """
    Returns a BirdConcept object of the barn swallow (Hirundo rustica), an
    aerial insectivore with long, pointed wings.
    """
    geometry = {"mass_kg": 0.017, "span_m": 0.324, "wingarea_m2": 0.014}
    return BirdConcept(geometry=geometry)


def Rufous_Spinetail():
    """
    Returns a BirdConcept object of the rufous spinetail (Synallaxis
    unirufa), a passerine of similar mass to the barn swallow but with short,
    rounded wings.
    """
    geometry = {"mass_kg": 0.0173, "span_m": 0.187, "wingarea_m2": 0.0087}
    return BirdConcept(geometry=geometry)


def Eurasian_Wigeon():
    """
    Returns a BirdConcept object of the Eurasian wigeon (Anas penelope).

    References:
        Pennycuick, C. J., "Modelling the Flying Bird," Academic Press, 2008.
        Figure 3.5.
    """
    geometry = {"mass_kg": 0.770, "span_m": 0.822, "wingarea_m2": 0.0829}
    return BirdConcept(geometry=geometry)
