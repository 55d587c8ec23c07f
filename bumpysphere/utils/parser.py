import os
import yaml
from ..core.engine import WIDTH, HEIGHT

DEFAULT_PATTERN = "frame_{index:04d}.ppm"

KNOWN_KEYS = ('Frames', 'Amplitude', 'Resolution', 'Output', 'Threads')

def default_config():
    return {
        'frames': 20,
        'amplitude_start': 1.0,
        'amplitude_step': -0.05,
        'width': WIDTH,
        'height': HEIGHT,
        'output_dir': 'renders',
        'pattern': DEFAULT_PATTERN,
        'threads': 0,
    }

def _as_int(key, value, minimum):
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValueError(f"{key} must be an integer >= {minimum}, got {value!r}")
    return value

def _as_float(key, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return float(value)

def parse_config(data):
    """Build an animation config dict from already-loaded YAML data."""
    config = default_config()
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ValueError(f"Animation config must be a mapping, got {type(data).__name__}")

    for key in data:
        if key not in KNOWN_KEYS:
            print(f"Warning: ignoring unknown config key {key}")

    if 'Frames' in data:
        config['frames'] = _as_int('Frames', data['Frames'], 0)

    amp = data.get('Amplitude', {})
    if not isinstance(amp, dict):
        raise ValueError(f"Amplitude must be a mapping, got {amp!r}")
    if 'Start' in amp:
        config['amplitude_start'] = _as_float('Amplitude.Start', amp['Start'])
    if 'Step' in amp:
        config['amplitude_step'] = _as_float('Amplitude.Step', amp['Step'])

    if 'Resolution' in data:
        res = data['Resolution']
        if not isinstance(res, (list, tuple)) or len(res) != 2:
            raise ValueError(f"Resolution must be [width, height], got {res!r}")
        config['width'] = _as_int('Resolution width', res[0], 1)
        config['height'] = _as_int('Resolution height', res[1], 1)

    out = data.get('Output', {})
    if not isinstance(out, dict):
        raise ValueError(f"Output must be a mapping, got {out!r}")
    config['output_dir'] = str(out.get('Dir', config['output_dir']))
    config['pattern'] = str(out.get('Pattern', config['pattern']))

    if 'Threads' in data:
        config['threads'] = _as_int('Threads', data['Threads'], 0)

    return config

def parse_animation(yaml_path):
    if not os.path.exists(yaml_path):
        raise FileNotFoundError(f"Animation config not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        data = yaml.safe_load(f)

    config = parse_config(data)

    # Relative output dirs are resolved against the YAML file
    if not os.path.isabs(config['output_dir']):
        yaml_dir = os.path.dirname(os.path.abspath(yaml_path))
        config['output_dir'] = os.path.join(yaml_dir, config['output_dir'])

    return config
