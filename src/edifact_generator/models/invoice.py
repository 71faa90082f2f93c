"""Modèles principaux pour les factures INVOIC.

FR: Modèles Pydantic des données métier d'une facture : en-tête, lignes
    d'article avec remises, totaux calculés. Ils alimentent le générateur
    qui les traduit en segments EDIFACT.
EN: Pydantic models for an invoice's business data (header, line items
    with discounts, computed totals), consumed by the generator.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from edifact_generator.models.enums import DocumentType
from edifact_generator.models.party import Contact, Party


class Discount(BaseModel):
    """Remise sur une ligne (ALC / PCD / MOA 204)."""

    amount: Decimal = Field(
        ...,
        description=(
            "Montant de la remise (émis en valeur absolue) / "
            "Discount amount (emitted as absolute value)"
        ),
    )
    percent: Decimal = Field(..., ge=0, description="Taux de remise en % / Discount rate in %")
    name: str = Field(default="", description="Libellé / Discount name")
    qualifier: str = Field(
        default="TD",
        description="Code de service spécial (7161) / Special service code",
    )


class InvoiceLine(BaseModel):
    """Ligne de facture.

    FR: Article facturé avec quantité, prix net et éventuellement prix
        brut et remises. Le montant de ligne est quantité × prix net.
    EN: Invoiced item; line amount is quantity × net price.
    """

    position: int | None = Field(
        default=None,
        gt=0,
        description=(
            "Numéro de ligne (auto-numéroté si absent) / "
            "Line number (auto-numbered if not set)"
        ),
    )
    ean: str | None = Field(default=None, description="Code EAN / GTIN")
    supplier_article_number: str | None = Field(
        default=None,
        description="Référence article fournisseur / Supplier article number",
    )
    description: str = Field(..., description="Désignation / Item description")
    quantity: Decimal = Field(..., description="Quantité facturée / Invoiced quantity")
    unit: str = Field(default="PCE", description="Unité de mesure / Unit of measure")
    unit_price: Decimal = Field(..., description="Prix unitaire net / Net unit price")
    gross_price: Decimal | None = Field(
        default=None,
        description="Prix unitaire brut / Gross unit price",
    )
    note: str | None = Field(default=None, description="Texte libre / Free text")
    discounts: list[Discount] = Field(
        default_factory=list,
        description="Remises de la ligne / Line discounts",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def line_total_excl_tax(self) -> Decimal:
        """Montant HT de la ligne / Line total excluding tax."""
        return self.quantity * self.unit_price


class Invoice(BaseModel):
    """Facture INVOIC.

    FR: Données nécessaires à un message INVOIC D96A : identification,
        dates, parties, lignes et taux de TVA unique appliqué aux lignes
        et au récapitulatif.
    EN: Data needed for a D96A INVOIC message with a single VAT rate
        applied to lines and summary.
    """

    # --- Identification ---
    number: str = Field(..., description="Numéro de facture / Invoice number")
    type_code: DocumentType = Field(
        default=DocumentType.INVOICE,
        description="Type de document / Document type code",
    )
    issue_date: date = Field(..., description="Date de facture / Invoice date")
    delivery_date: date | None = Field(
        default=None,
        description="Date de livraison / Delivery date",
    )
    reference: str | None = Field(
        default=None,
        description="Facture de référence (avoirs) / Referenced invoice number",
    )
    currency: str | None = Field(
        default=None,
        min_length=3,
        max_length=3,
        description="Code devise ISO 4217 (défaut : configuration) / Currency code",
    )
    vat_rate: Decimal = Field(
        default=Decimal("20"),
        ge=0,
        description="Taux de TVA en % / VAT rate in %",
    )

    # --- Parties ---
    supplier: Party = Field(..., description="Fournisseur / Supplier")
    buyer: Party = Field(..., description="Acheteur / Buyer")
    invoicee: Party | None = Field(
        default=None,
        description="Destinataire de la facture si différent / Invoicee",
    )
    delivery_party: Party | None = Field(
        default=None,
        description="Destinataire de la marchandise / Ship-to party",
    )
    contact: Contact | None = Field(default=None, description="Interlocuteur / Contact")

    # --- Textes ---
    description: str | None = Field(default=None, description="Note libre / Free text note")
    excluding_vat_text: str | None = Field(
        default=None,
        description="Mention d'exonération de TVA / VAT exemption text",
    )

    # --- Lignes ---
    lines: list[InvoiceLine] = Field(
        ...,
        min_length=1,
        description="Lignes de facture / Invoice lines",
    )

    # --- Totaux calculés ---

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_excl_tax(self) -> Decimal:
        """Total HT / Total excluding tax."""
        return sum((line.line_total_excl_tax for line in self.lines), Decimal("0"))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_vat(self) -> Decimal:
        """Total TVA / Total VAT."""
        return (self.total_excl_tax * self.vat_rate / Decimal("100")).quantize(Decimal("0.01"))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_incl_tax(self) -> Decimal:
        """Total TTC / Total including tax."""
        return self.total_excl_tax + self.total_vat
