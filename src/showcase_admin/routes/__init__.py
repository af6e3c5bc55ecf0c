"""HTTP routes exposing the admin edit flows."""

from showcase_admin.routes import about, categories, health, languages, messages, projects, sessions

ROUTERS = (
    health.router,
    about.router,
    categories.router,
    projects.router,
    messages.router,
    languages.router,
    sessions.router,
)

__all__ = ["ROUTERS"]
