"""
IPCheck - IP Address Checker

Entry point for running as a module:
    python -m ipcheck <address>
"""

from .cli import main

if __name__ == '__main__':
    main()
