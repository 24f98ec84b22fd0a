"""
Password digest helper.

Stored user passwords are the MD5 hex digest of the submitted value.
This is the format the existing frontend and user records rely on; it
is a fixed one‑way digest, not a password hashing scheme, and there
is no login endpoint that checks it.
"""

import hashlib


def hash_password(password: str) -> str:
    """Return the MD5 hex digest of ``password``.

    Only strings reach this function: the user schemas reject
    non‑string passwords before the service hashes them.

    Parameters
    ----------
    password : str
        The submitted password.

    Returns
    -------
    str
        32 character lowercase hex digest.
    """
    return hashlib.md5(password.encode("utf-8")).hexdigest()
