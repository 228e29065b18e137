"""
Only the root tests directory keeps an __init__.py; subdirectories are namespace
packages (PEP 420). Keeping this one makes `tests.helpers` importable from any
test module.
"""
