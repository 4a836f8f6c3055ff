"""Access policy factory.

Provides get_access_policy() / set_access_policy() to swap implementations:
- OpenAccess (default) allows every write
- OwnerOnlyAccess restricts writes to the ledger owner

The default is chosen by the LEDGER_ACCESS_POLICY environment variable.
"""

import os

from tracking.access.port import AccessPolicy

_current_policy: AccessPolicy | None = None


def get_access_policy() -> AccessPolicy:
    """Return the active access policy (singleton)."""
    global _current_policy
    if _current_policy is None:
        name = os.environ.get("LEDGER_ACCESS_POLICY", "open")
        if name == "open":
            from tracking.access.open_policy import OpenAccess

            _current_policy = OpenAccess()
        elif name == "owner":
            from tracking.access.owner_policy import OwnerOnlyAccess

            _current_policy = OwnerOnlyAccess()
        else:
            raise ValueError(f"Unknown access policy: {name}")
    return _current_policy


def set_access_policy(policy: AccessPolicy) -> None:
    """Override the active access policy (useful for tests)."""
    global _current_policy
    _current_policy = policy


def reset_access_policy() -> None:
    """Reset so the next lookup re-reads LEDGER_ACCESS_POLICY."""
    global _current_policy
    _current_policy = None
