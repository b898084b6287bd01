"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` that includes every
resource router from ``endpoints``; ``create_app`` mounts it under
``/api``.
"""
