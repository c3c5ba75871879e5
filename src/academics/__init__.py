"""
Academic records package.

Tracks professors, students, subjects, enrollments and task submissions in an
in-memory store. Each application owns one ``AcademicsService`` which the HTTP
routes reach through ``request.app.state``.
"""

from .router import router  # noqa: F401
from .service import AcademicsService  # noqa: F401
