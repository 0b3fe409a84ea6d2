"""Record identifier generation."""

from uuid import uuid4


def new_id(prefix: str) -> str:
    """Return a collection-unique identifier such as ``apt_3f2c...``.

    Random UUID4 hex rather than a creation timestamp, so two records
    created within the same millisecond never share an id.
    """
    return f"{prefix}_{uuid4().hex}"
