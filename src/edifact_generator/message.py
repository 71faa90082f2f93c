"""Message EDIFACT générique (enveloppe UNH/UNT).

FR: Classe de base de tous les types de message. Le contenu est produit
    par compose_content() (par défaut : composition sur KEY_ORDER), puis
    encadré par l'en-tête UNH et la fin de message UNT dont le compteur
    inclut UNH et UNT.
EN: Base class for every message type: content from compose_content(),
    wrapped in UNH/UNT. The UNT count includes UNH and UNT.
"""

from __future__ import annotations

from uuid import uuid4

from edifact_generator.composition import SegmentComposer
from edifact_generator.conf import get_setting
from edifact_generator.segments import Segment


def new_message_reference() -> str:
    """Génère une référence de message unique (14 caractères, an..14)."""
    return uuid4().hex[:14].upper()


class Message(SegmentComposer):
    """Message EDIFACT avec enveloppe UNH/UNT.

    FR: L'identifiant de type (INVOIC, ORDERS…), la version, la release,
        l'agence de contrôle et le code d'association forment le
        composite S009 de l'UNH.
    EN: Type identifier, version, release, controlling agency and
        association code make up the UNH S009 composite.
    """

    def __init__(
        self,
        identifier: str,
        version: str = "D",
        release: str = "96A",
        controlling_agency: str | None = None,
        message_id: str | None = None,
        association: str | None = None,
    ) -> None:
        super().__init__()
        self.identifier = identifier
        self.version = version
        self.release = release
        self.controlling_agency = (
            str(get_setting("CONTROLLING_AGENCY"))
            if controlling_agency is None
            else controlling_agency
        )
        self.association = (
            str(get_setting("ASSOCIATION_CODE")) if association is None else association
        )
        self.message_id = message_id or new_message_reference()

    def message_header(self) -> Segment:
        """Segment UNH."""
        identifier = (
            self.identifier,
            self.version,
            self.release,
            self.controlling_agency,
        )
        if self.association:
            identifier += (self.association,)
        return ("UNH", self.message_id, identifier)

    def message_trailer(self, segment_count: int) -> Segment:
        """Segment UNT."""
        return ("UNT", str(segment_count), self.message_id)

    def compose_content(self) -> list[Segment]:
        """Segments du corps du message (hors UNH/UNT)."""
        return self.compose_by_keys()

    def compose(self) -> list[Segment]:
        """Compose le message complet, enveloppe comprise.

        FR: Lecture pure de l'état : deux appels successifs renvoient deux
            listes égales et indépendantes.
        EN: Pure read of state: repeated calls return equal, independent lists.
        """
        content = self.compose_content()
        return [
            self.message_header(),
            *content,
            self.message_trailer(len(content) + 2),
        ]
