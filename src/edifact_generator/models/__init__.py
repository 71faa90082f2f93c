"""Modèles de données Pydantic pour la facturation EDIFACT."""

from edifact_generator.models.invoice import Discount, Invoice, InvoiceLine
from edifact_generator.models.party import Address, Contact, Party

__all__ = [
    "Address",
    "Contact",
    "Discount",
    "Invoice",
    "InvoiceLine",
    "Party",
]
