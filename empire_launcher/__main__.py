"""Module entrypoint.
Invoked as: EMPIRELAUNCHER_MAIN_CLASS=pkg.mod.App python -m empire_launcher [args...]
This simply delegates to main.main() which forwards the args untouched.
"""
from .main import main

if __name__ == "__main__":  # pragma: no cover
    main()
