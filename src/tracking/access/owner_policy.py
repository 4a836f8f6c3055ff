"""Opt-in access policy restricting ledger writes to its owner."""

from protean.exceptions import ValidationError

from tracking.access.port import AccessPolicy


class OwnerOnlyAccess(AccessPolicy):
    def authorize(self, ledger, actor, action) -> None:
        if not actor:
            raise ValidationError({"actor": [f"An actor is required to {action.replace('_', ' ')}"]})
        if actor != ledger.owner:
            raise ValidationError({"actor": [f"Only the ledger owner may {action.replace('_', ' ')}"]})
