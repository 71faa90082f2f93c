"""Message INVOIC et ses lignes d'article."""

from edifact_generator.invoic.item import Item, ItemKey
from edifact_generator.invoic.message import HeaderKey, Invoic, TrailerKey

__all__ = [
    "HeaderKey",
    "Invoic",
    "Item",
    "ItemKey",
    "TrailerKey",
]
