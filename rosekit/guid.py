"""Random 64-bit identifiers for assets, packages and animation parts."""

import secrets

Guid = int

GUID_BITS = 64


def new_guid() -> Guid:
    """Return a fresh random unsigned 64-bit identifier."""
    return secrets.randbits(GUID_BITS)