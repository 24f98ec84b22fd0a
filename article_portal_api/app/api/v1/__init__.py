"""
Version 1 of the API.

Version 1 is mounted at the application root so that the paths match
the ones used by the existing web frontend (``/users``,
``/users/{email}/`` and so on).
"""
