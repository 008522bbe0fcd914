"""
Entry point for ``python -m gitpulse``.
"""

from .cli import main

if __name__ == '__main__':
    main()
