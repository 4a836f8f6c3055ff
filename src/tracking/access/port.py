"""Access policy port — the authorization hook consulted by the ledger.

The ledger asks the active policy before every write. Policies raise to
deny; returning normally allows the operation.
"""

from abc import ABC, abstractmethod
from typing import Any


class AccessPolicy(ABC):
    """Abstract interface for ledger access policies."""

    @abstractmethod
    def authorize(self, ledger: Any, actor: str | None, action: str) -> None:
        """Allow or deny ``actor`` performing ``action`` on ``ledger``.

        Raises:
            ValidationError: when the action is not permitted.
        """
        ...
