"""Génération de messages UN/EDIFACT D96A INVOIC.

FR: Moteur de composition ordonnée de segments EDIFACT à partir de champs
    métier renseignés au coup par coup, avec validation des codes et
    formatage numérique. La sérialisation texte (séparateurs,
    échappement, interchange UNB/UNZ) est hors du périmètre.
EN: Ordered EDIFACT segment composition engine with code validation and
    numeric formatting. Text serialization is out of scope.
"""

from edifact_generator.composition import SegmentComposer
from edifact_generator.errors import (
    DisallowedCodeError,
    EdifactError,
    InvalidNumericInputError,
)
from edifact_generator.generators import GenerationResult, InvoicGenerator
from edifact_generator.invoic import Invoic, Item
from edifact_generator.message import Message
from edifact_generator.number import convert

__version__ = "0.1.0"

__all__ = [
    "DisallowedCodeError",
    "EdifactError",
    "GenerationResult",
    "InvalidNumericInputError",
    "Invoic",
    "InvoicGenerator",
    "Item",
    "Message",
    "SegmentComposer",
    "convert",
]
