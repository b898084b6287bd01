"""
Application package initializer.

This package contains the entrypoint for the portfolio API and its
submodules.  Each resource type (profile, projects, educations,
skills, experiences, achievements, contact and messages) has a schema
module under ``schemas``, is served by a service under ``services``
and exposes a router defined in ``api/endpoints``.
"""

from .main import app  # noqa: F401
