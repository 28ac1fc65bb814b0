"""
This __init__.py file is kept in the root tests directory while other __init__.py files
in the test structure are left out for simplicity.

It lets test modules import shared helpers as `tests.helpers.*`. Subdirectories work
as namespace packages (PEP 420) and need no __init__.py of their own.
"""
