"""ID utilities."""

from __future__ import annotations

import uuid


def new_item_id() -> str:
    """Return a fresh item id.

    The tree engine never generates ids itself; callers (CLI, API, storage seeding) use
    this to supply them.
    """

    return str(uuid.uuid4())
