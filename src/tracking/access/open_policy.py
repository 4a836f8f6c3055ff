"""Default access policy: every caller may write to the ledger."""

from tracking.access.port import AccessPolicy


class OpenAccess(AccessPolicy):
    def authorize(self, ledger, actor, action) -> None:
        return None
