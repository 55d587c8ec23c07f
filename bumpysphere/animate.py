import os
import argparse
import numba

from .core.renderer import Renderer
from .utils.parser import default_config, parse_animation

def amplitude_for_frame(config, index):
    return config['amplitude_start'] + index * config['amplitude_step']

def frame_path(config, index):
    return os.path.join(config['output_dir'], config['pattern'].format(index=index))

def render_animation(config, quiet=False):
    """Render every frame of the animation, one after another.

    Each frame is written out before the next one starts. Returns the list of
    written paths.
    """
    if config['threads'] > 0:
        numba.set_num_threads(min(config['threads'], numba.config.NUMBA_NUM_THREADS))

    renderer = Renderer(width=config['width'], height=config['height'])
    paths = []

    for index in range(config['frames']):
        amplitude = amplitude_for_frame(config, index)
        path = frame_path(config, index)
        if not quiet:
            print(f"Rendering frame {index + 1}/{config['frames']} (noise amplitude {amplitude:.3f})")

        renderer.render_to_file(amplitude, path)
        paths.append(path)
        if not quiet:
            print(f"  Saved: {path}")

    return paths

def render_yaml(yaml_path, output_dir=None, quiet=False):
    config = parse_animation(yaml_path)
    if output_dir is not None:
        config['output_dir'] = output_dir
    return render_animation(config, quiet=quiet)

def build_parser():
    parser = argparse.ArgumentParser(description="Render the bumpy sphere animation")
    parser.add_argument("yaml_file", nargs="?", help="Optional YAML animation config")
    parser.add_argument("--frames", type=int, help="Number of frames")
    parser.add_argument("--amplitude", type=float, help="Noise amplitude of the first frame")
    parser.add_argument("--step", type=float, help="Amplitude change per frame")
    parser.add_argument("--width", type=int, help="Output width")
    parser.add_argument("--height", type=int, help="Output height")
    parser.add_argument("--output", help="Output directory")
    parser.add_argument("--pattern", help="Filename pattern, e.g. frame_{index:04d}.png")
    parser.add_argument("--threads", type=int, help="Worker threads (0 = all cores)")
    parser.add_argument("--quiet", action="store_true", help="Do not print progress")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.yaml_file:
        config = parse_animation(args.yaml_file)
    else:
        config = default_config()

    overrides = {
        'frames': args.frames,
        'amplitude_start': args.amplitude,
        'amplitude_step': args.step,
        'width': args.width,
        'height': args.height,
        'output_dir': args.output,
        'pattern': args.pattern,
        'threads': args.threads,
    }
    for key, value in overrides.items():
        if value is not None:
            config[key] = value

    if config['frames'] < 0:
        raise SystemExit("Error: --frames must not be negative")
    if config['width'] <= 0 or config['height'] <= 0:
        raise SystemExit("Error: --width and --height must be positive")
    if config['threads'] < 0:
        raise SystemExit("Error: --threads must not be negative")

    paths = render_animation(config, quiet=args.quiet)
    if not args.quiet:
        print(f"Rendered {len(paths)} frame(s) to {config['output_dir']}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
