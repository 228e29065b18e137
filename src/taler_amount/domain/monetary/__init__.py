"""Monetary domain package.

This package contains the fixed-point Amount type (8 fractional digits), its
canonical string parser and formatter, and the registry of currency
specifications used to display amounts.
"""
