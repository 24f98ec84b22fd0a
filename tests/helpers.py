"""Payload builders shared by the test modules."""
import hashlib


def md5(value):
    return hashlib.md5(value.encode("utf-8")).hexdigest()


def make_user(**overrides):
    """Build a valid six field create payload."""
    user = {
        "name": "A",
        "email": "a@x.com",
        "phone": 1234567890,
        "password": "p",
        "visitHistory": [],
        "preferredKeyword": [],
    }
    user.update(overrides)
    return user
