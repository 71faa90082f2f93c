"""Cœur de composition ordonnée des segments.

FR: Une entité (message ou ligne d'article) stocke des segments déjà
    construits dans des slots nommés, puis les restitue dans l'ordre de
    clés déclaré par sa classe (KEY_ORDER), en ignorant les slots vides.
    L'ordre de sortie ne dépend jamais de l'ordre d'appel des setters.
    Les clés hors KEY_ORDER (EXTRA_KEYS) ne sont émises que lorsqu'un
    appelant les demande explicitement, ce qui permet de composer
    l'en-tête et le récapitulatif en deux passes distinctes.
EN: An entity stores pre-built segments in named slots and emits them in
    its declared key order, skipping unset slots. Output order never
    depends on setter call order. EXTRA_KEYS are only emitted when a
    caller asks for them explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable

from edifact_generator.segments import Segment, SlotValue, is_segment


class SegmentComposer:
    """Base des entités composables par clés.

    FR: Les sous-classes déclarent KEY_ORDER (ordre de composition par
        défaut) et éventuellement EXTRA_KEYS. Un slot contient soit un
        segment, soit un tuple de segments émis dans l'ordre stocké.
        compose_by_keys() est une lecture pure : chaque appel renvoie une
        nouvelle liste.
    EN: Subclasses declare KEY_ORDER (default composition order) and
        optionally EXTRA_KEYS. compose_by_keys() is a pure read that
        returns a fresh list on every call.
    """

    KEY_ORDER: tuple[str, ...] = ()
    EXTRA_KEYS: tuple[str, ...] = ()

    def __init__(self) -> None:
        self._slots: dict[str, SlotValue] = {}

    @classmethod
    def slot_keys(cls) -> frozenset[str]:
        """Ensemble des clés acceptées par l'entité."""
        return frozenset(cls.KEY_ORDER) | frozenset(cls.EXTRA_KEYS)

    def _check_key(self, key: str) -> None:
        if key not in self.slot_keys():
            msg = f"Clé de composition inconnue pour {type(self).__name__} : {key!r}"
            raise KeyError(msg)

    def _set_slot(self, key: str, value: SlotValue) -> None:
        self._check_key(key)
        self._slots[key] = value

    def get_slot(self, key: str) -> SlotValue | None:
        """Retourne le contenu d'un slot (None si non renseigné)."""
        self._check_key(key)
        return self._slots.get(key)

    def is_set(self, key: str) -> bool:
        """Indique si le slot a été renseigné."""
        return self.get_slot(key) is not None

    def compose_by_keys(self, keys: Iterable[str] | None = None) -> list[Segment]:
        """Compose les slots renseignés dans l'ordre des clés.

        Args:
            keys: Clés à restituer, dans l'ordre voulu. Par défaut KEY_ORDER.

        Returns:
            Nouvelle liste de segments.

        Raises:
            KeyError: Si une clé n'appartient pas à l'entité.
        """
        segments: list[Segment] = []
        for key in self.KEY_ORDER if keys is None else keys:
            value = self.get_slot(key)
            if value is None:
                continue
            if is_segment(value):
                segments.append(value)  # type: ignore[arg-type]
            else:
                segments.extend(value)  # type: ignore[arg-type]
        return segments
