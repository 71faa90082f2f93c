"""Construction des segments EDIFACT.

FR: Un segment est un tuple immuable : le tag, puis des éléments simples
    (str) ou composites (tuple[str, ...]). Un slot multi-segments contient
    un tuple de segments.
EN: A segment is an immutable tuple: the tag, then simple (str) or
    composite (tuple[str, ...]) elements.
"""

Segment = tuple[str | tuple[str, ...], ...]
SlotValue = Segment | tuple[Segment, ...]


def is_segment(value: SlotValue) -> bool:
    """Indique si la valeur est un segment (et non une suite de segments)."""
    return bool(value) and isinstance(value[0], str)


__all__ = ["Segment", "SlotValue", "is_segment"]
