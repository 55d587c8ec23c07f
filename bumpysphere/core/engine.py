import numpy as np
from numba import njit, prange
from .math import vec3, add, subtract, scale, dot, magnitude, normalize
from ..shapes.sdf import sdBumpySphere

# CONSTANTS
WIDTH = 640
HEIGHT = 480
FOV = np.pi / 3.0

SPHERE_RADIUS = 1.5
NORMAL_EPSILON = 0.1

MAX_STEPS = 128
MARCH_DAMPING = 0.1
MIN_STEP = 0.01
DIRECTION_TOLERANCE = 1e-6

CAMERA_ORIGIN = (0.0, 0.0, 3.0)
LIGHT_POSITION = (10.0, 10.0, 10.0)
BACKGROUND_COLOR = (0.2, 0.7, 0.8)
AMBIENT_FLOOR = 0.4

@njit
def signed_distance(p, noise_amplitude):
    return sdBumpySphere(p, SPHERE_RADIUS, noise_amplitude)

@njit
def calc_normal(p, noise_amplitude):
    # Forward differences. d is recomputed rather than taken from the
    # marcher so the result does not depend on the caller.
    d = signed_distance(p, noise_amplitude)
    nx = signed_distance(add(p, vec3(NORMAL_EPSILON, 0.0, 0.0)), noise_amplitude) - d
    ny = signed_distance(add(p, vec3(0.0, NORMAL_EPSILON, 0.0)), noise_amplitude) - d
    nz = signed_distance(add(p, vec3(0.0, 0.0, NORMAL_EPSILON)), noise_amplitude) - d
    return normalize(vec3(nx, ny, nz))

@njit
def trace(noise_amplitude, origin, direction):
    if abs(magnitude(direction) - 1.0) > DIRECTION_TOLERANCE:
        raise ValueError("ray direction must be normalized")

    pos = vec3(origin[0], origin[1], origin[2])
    for i in range(MAX_STEPS):
        d = signed_distance(pos, noise_amplitude)
        # Inside already: pos is left slightly past the surface
        if d < 0.0:
            return True, pos
        pos = add(pos, scale(direction, max(d * MARCH_DAMPING, MIN_STEP)))

    return False, pos

@njit
def get_lighting(p, noise_amplitude):
    light = vec3(LIGHT_POSITION[0], LIGHT_POSITION[1], LIGHT_POSITION[2])
    light_dir = normalize(subtract(light, p))
    n = calc_normal(p, noise_amplitude)
    intensity = max(AMBIENT_FLOOR, dot(light_dir, n))
    return vec3(intensity, intensity, intensity)

@njit
def camera_ray(i, j, width, height):
    dir_x = (i + 0.5) - width / 2.0
    # Row 0 is the top of the image
    dir_y = -(j + 0.5) + height / 2.0
    dir_z = -height / (2.0 * np.tan(FOV / 2.0))
    return normalize(vec3(dir_x, dir_y, dir_z))

@njit
def raymarch_kernel(noise_amplitude, ro, rd):
    hit, p = trace(noise_amplitude, ro, rd)
    if hit:
        return get_lighting(p, noise_amplitude)
    return vec3(BACKGROUND_COLOR[0], BACKGROUND_COLOR[1], BACKGROUND_COLOR[2])

@njit(parallel=True)
def render_pixels(width, height, noise_amplitude, output_buffer):
    ro = vec3(CAMERA_ORIGIN[0], CAMERA_ORIGIN[1], CAMERA_ORIGIN[2])

    # Rows only read the constants above and write their own slice
    for j in prange(height):
        for i in range(width):
            rd = camera_ray(i, j, width, height)
            col = raymarch_kernel(noise_amplitude, ro, rd)

            idx = (i + j * width) * 3
            output_buffer[idx] = col[0]
            output_buffer[idx+1] = col[1]
            output_buffer[idx+2] = col[2]

def render_frame(width, height, noise_amplitude):
    """Render one frame and return a (width * height, 3) float32 framebuffer.

    Pixel (i, j) lives at row ``i + j * width``.
    """
    if int(width) != width or int(height) != height or width <= 0 or height <= 0:
        raise ValueError(f"Invalid frame size {width}x{height}")
    width, height = int(width), int(height)

    output_buffer = np.zeros(width * height * 3, dtype=np.float32)
    render_pixels(width, height, float(noise_amplitude), output_buffer)
    return output_buffer.reshape((width * height, 3))
