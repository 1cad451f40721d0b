"""
Instance identifier generation for items created at runtime.

Identifiers combine a per-generator session token with a monotonic counter, so
two drops in quick succession never share an id, and ids from different
generators (e.g., different game sessions) do not collide either.
"""

import itertools
import uuid


class InstanceIdGenerator:
    """
    Generates unique item instance identifiers of the form
    ``{prefix}_{session}_{counter}``.

    Attributes:
        session (str):
            The token shared by every id this generator produces.

    """

    def __init__(self, session: str | None = None, start: int = 1) -> None:
        """
        Initialize the generator.

        Args:
            session (str | None):
                A fixed session token. A random one is used if not provided.
            start (int):
                The first counter value.

        """
        self.session: str = session or uuid.uuid4().hex[:12]
        self._counter = itertools.count(start)

    def next_id(self, prefix: str) -> str:
        """
        Returns a new identifier.

        Args:
            prefix (str):
                A readable prefix, typically the lower-case item type.

        Returns:
            str:
                The new identifier.

        """
        return f"{prefix}_{self.session}_{next(self._counter)}"
