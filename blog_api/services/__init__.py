"""Business logic behind the routers.

Services take a database session (and settings where they sign tokens)
as explicit arguments and raise ``blog_api.errors`` on failure.
"""
