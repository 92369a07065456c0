"""Event type constants published on the EventBus."""


class EventTypes:
    """Event name strings"""

    # inventory
    ITEM_CONSUMED = "item_consumed"
    ITEM_DEPLETED = "item_depleted"

    # player
    VITALS_CHANGED = "vitals_changed"
