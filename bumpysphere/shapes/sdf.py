import numpy as np
from numba import njit
from ..core.math import magnitude, scale

NOISE_FREQUENCY = 16.0

@njit
def sdSphere(p, r):
    return magnitude(p) - r

@njit
def sphere_displacement(p, r, amplitude):
    # Noise is sampled on the sphere itself so the wrinkles stay put
    # as p moves along the ray from the centre.
    l = magnitude(p)
    if l == 0.0:
        raise ValueError("displacement is undefined at the sphere centre")
    s = scale(p, r / l)
    return (np.sin(NOISE_FREQUENCY * s[0])
            * np.sin(NOISE_FREQUENCY * s[1])
            * np.sin(NOISE_FREQUENCY * s[2])
            * amplitude)

@njit
def sdBumpySphere(p, r, amplitude):
    # Not a true distance: the noise term breaks the Lipschitz bound,
    # so callers must march with damped steps.
    d = sphere_displacement(p, r, amplitude)
    return magnitude(p) - (r + d)
