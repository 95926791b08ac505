"""
API package containing the HTTP routers.

``router.py`` aggregates the domain routers in ``endpoints`` into a
single router which ``main.create_app`` mounts under the configured
prefix.
"""
