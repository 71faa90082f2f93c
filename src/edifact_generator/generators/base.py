"""Interface abstraite pour les générateurs de messages EDIFACT."""

from abc import ABC, abstractmethod

from edifact_generator.message import Message
from edifact_generator.models.invoice import Invoice
from edifact_generator.segments import Segment


class GenerationResult:
    """Résultat de la génération d'un message.

    FR: Contient la liste ordonnée des segments (enveloppe UNH/UNT
        comprise), prête pour la sérialisation, et la référence du message.
    EN: Holds the ordered segment list (UNH/UNT included), ready for
        serialization, and the message reference.
    """

    def __init__(self, segments: list[Segment], message_reference: str) -> None:
        self.segments = segments
        self.message_reference = message_reference

    @property
    def segment_count(self) -> int:
        """Nombre de segments, tel que déclaré dans l'UNT."""
        return len(self.segments)

    def tags(self) -> list[str]:
        """Tags des segments, dans l'ordre."""
        return [str(segment[0]) for segment in self.segments]


class BaseGenerator(ABC):
    """Classe de base abstraite pour les générateurs de messages.

    FR: Chaque type de message (INVOIC…) fournit son générateur, qui
        traduit un modèle métier en entité composable.
    EN: Each message type provides a generator turning a business model
        into a composable entity.
    """

    def __init__(self, association: str | None = None) -> None:
        self.association = association

    @abstractmethod
    def build_message(self, invoice: Invoice, message_id: str | None = None) -> Message:
        """Construit l'entité message renseignée à partir du modèle.

        Args:
            invoice: Le modèle de facture.
            message_id: Référence de message (générée si absente).

        Returns:
            L'entité message, prête à être composée.
        """
        ...

    @abstractmethod
    def generate(self, invoice: Invoice, message_id: str | None = None) -> GenerationResult:
        """Génère le message complet (liste de segments).

        Args:
            invoice: Le modèle de facture.
            message_id: Référence de message (générée si absente).

        Returns:
            GenerationResult contenant les segments générés.
        """
        ...
