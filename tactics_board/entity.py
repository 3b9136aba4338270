"""Entity ID allocation.

The board only stores IDs and coordinates. Unit records allocate their own ID
on construction; IDs come from one process-wide counter and are never reused,
so two boards built in the same process never disagree about who is who.
"""

from itertools import count

from tactics_board.types import EntityID

_next_id = count()


def new_entity_id() -> EntityID:
    return next(_next_id)
