"""
IPCheck - IP Address Checker

Validates IPv4/IPv6 literals and reports address class, public/private
scope, special-use category and binary form.
"""

__version__ = "1.0.0"
__author__ = "IPCheck"
