"""Item consumption failures.

Each error is detected before any write and carries a descriptive
message suitable for returning to the caller as-is.
"""

from enum import Enum


class ConsumeErrorKind(str, Enum):
    ITEM_NOT_FOUND = "item_not_found"
    NOT_OWNER = "not_owner"
    DEFINITION_NOT_FOUND = "definition_not_found"
    NOT_CONSUMABLE = "not_consumable"
    ACTOR_NOT_FOUND = "actor_not_found"


class ConsumeError(Exception):
    kind: ConsumeErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ItemNotFound(ConsumeError):
    kind = ConsumeErrorKind.ITEM_NOT_FOUND

    def __init__(self, instance_id: int) -> None:
        super().__init__(f"Item instance {instance_id} not found.")
        self.instance_id = instance_id


class NotOwner(ConsumeError):
    kind = ConsumeErrorKind.NOT_OWNER

    def __init__(self) -> None:
        super().__init__("Cannot consume an item that does not belong to you.")


class DefinitionNotFound(ConsumeError):
    """Instance references a definition id that does not exist."""

    kind = ConsumeErrorKind.DEFINITION_NOT_FOUND

    def __init__(self, item_def_id: int) -> None:
        super().__init__(f"Definition not found for item ID {item_def_id}")
        self.item_def_id = item_def_id


class NotConsumable(ConsumeError):
    kind = ConsumeErrorKind.NOT_CONSUMABLE

    def __init__(self, item_name: str) -> None:
        super().__init__(f"Item '{item_name}' is not consumable.")
        self.item_name = item_name


class ActorNotFound(ConsumeError):
    kind = ConsumeErrorKind.ACTOR_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Player not found to apply consumable effects.")
