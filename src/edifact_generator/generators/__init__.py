"""Générateurs de messages EDIFACT à partir des modèles métier."""

from edifact_generator.generators.base import BaseGenerator, GenerationResult
from edifact_generator.generators.invoic import InvoicGenerator

__all__ = [
    "BaseGenerator",
    "GenerationResult",
    "InvoicGenerator",
]
