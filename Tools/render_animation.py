import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bumpysphere.animate import main

if __name__ == "__main__":
    sys.exit(main())
