import numpy as np
from numba import njit

# Vectors are float64 arrays of shape (3,). Every helper returns a new array.

@njit
def vec3(x, y, z):
    return np.array([x, y, z], dtype=np.float64)

@njit
def add(a, b):
    return vec3(a[0] + b[0], a[1] + b[1], a[2] + b[2])

@njit
def subtract(a, b):
    return vec3(a[0] - b[0], a[1] - b[1], a[2] - b[2])

@njit
def scale(v, k):
    return vec3(v[0] * k, v[1] * k, v[2] * k)

@njit
def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

@njit
def magnitude(v):
    return np.sqrt(dot(v, v))

@njit
def normalize(v):
    l = magnitude(v)
    if l == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return scale(v, 1.0 / l)
