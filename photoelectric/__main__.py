"""
Photoelectric package entry point.

Allows running a simulated I-V sweep as a module:
    python -m photoelectric
    python -m photoelectric --material Na --start -2 --stop 1 --step 0.1
"""

from .main import main

if __name__ == "__main__":
    main()
