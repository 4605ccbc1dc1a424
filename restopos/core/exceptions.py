"""Domain errors raised by the POS services.

Routes never see these as 500s: ``restopos.api.errors`` maps each one to an
HTTP status.
"""


class PosError(Exception):
    """Base class for every error raised by the POS core."""


class EmptyCartError(PosError):
    def __init__(self):
        super().__init__("Cannot finalize an order with no items")


class NoPendingOrderError(PosError):
    def __init__(self):
        super().__init__("No finalized order is waiting for confirmation")


class PermissionDenied(PosError):
    def __init__(self, actor, resource, action: str = "modify"):
        self.actor = actor
        self.resource = resource
        self.action = action
        who = actor.username if actor is not None else "anonymous"
        super().__init__(f"{who} is not allowed to {action} {resource.value}")


class ConfirmationRequired(PosError):
    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Confirmation required to {action}")


class NotFoundError(PosError):
    def __init__(self, kind: str, key):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} {key} not found")
