"""
Routes of the application.

``router.py`` exposes a top-level ``router`` combining the JSON API
and the HTML page routes defined in ``endpoints``.
"""
