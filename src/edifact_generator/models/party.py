"""Modèles pour les parties, adresses et interlocuteurs.

FR: Représentation des entités nommées dans l'en-tête INVOIC (NAD, RFF,
    CTA, COM). Le GLN identifie la partie (agence 9).
EN: Entities named in the INVOIC header. The GLN identifies the party.
"""

from pydantic import BaseModel, Field


class Address(BaseModel):
    """Adresse postale.

    FR: Rue et nom sont découpés en lignes de 35 caractères dans le NAD.
    EN: Street and name are split into 35-character lines in the NAD.
    """

    street: str = Field(..., description="Rue et numéro / Street and number")
    city: str = Field(..., description="Ville / City")
    postal_code: str = Field(..., description="Code postal / Postal code")
    country_code: str = Field(
        default="FR",
        min_length=2,
        max_length=2,
        description="Code pays ISO 3166-1 alpha-2 / Country code",
    )


class Party(BaseModel):
    """Partie impliquée dans une facture (fournisseur, acheteur, facturé…)."""

    name: str = Field(..., description="Raison sociale / Legal name")
    gln: str | None = Field(
        default=None,
        pattern=r"^\d{13}$",
        description="GLN (13 chiffres) / Global Location Number",
    )
    address: Address = Field(..., description="Adresse principale / Main address")
    vat_number: str | None = Field(
        default=None,
        description="Numéro de TVA intracommunautaire / VAT identification number",
    )
    government_number: str | None = Field(
        default=None,
        description="Référence administrative (n° fiscal) / Government reference number",
    )
    company_number: str | None = Field(
        default=None,
        description="Immatriculation de la société / Company registration number",
    )


class Contact(BaseModel):
    """Interlocuteur du fournisseur pour la facture."""

    name: str = Field(..., description="Nom de l'interlocuteur / Contact name")
    email: str | None = Field(default=None, description="Adresse email / Email address")
    phone: str | None = Field(default=None, description="Téléphone / Phone number")
    fax: str | None = Field(default=None, description="Fax / Fax number")
