"""
===============================================================================
QUATKIT - Sampling Module
===============================================================================
Seeded generators of rotation-algebra values for property-style tests.

Submodules:
    generators -- Sampler: scalars, angles, vectors, quaternions, YPR triples
===============================================================================
"""

from quatkit.sampling.generators import Sampler

__all__ = ["Sampler"]
