"""
API package containing the board's HTTP routes.

``router.py`` exposes a top-level ``router`` that bundles the
domain-specific endpoint modules found in ``endpoints``.
"""
