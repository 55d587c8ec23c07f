from bumpysphere import Renderer
import sys

def main():
    if len(sys.argv) < 3:
        print("Usage: python render_preview.py <noise_amplitude> <output_image>")
        return

    amplitude = float(sys.argv[1])
    output_image = sys.argv[2]

    # Very Low quality for speed
    Renderer(width=160, height=120).render_to_file(amplitude, output_image)
    print(f"Rendered {output_image}")

if __name__ == "__main__":
    main()
