"""
This __init__.py file is kept in the root tests directory only; test subdirectories
are namespace packages (PEP 420).

It makes pytest treat tests/ as a package, so test modules with the same file name in
different subdirectories do not collide during collection.
"""
