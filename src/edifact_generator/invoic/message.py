"""Message INVOIC (facture UN/EDIFACT D96A).

FR: Orchestration en trois phases : en-tête (composition sur l'ordre de
    clés déclaré), lignes d'article (dans l'ordre d'ajout), puis
    récapitulatif (UNS, montants et taxe, totaux de contrôle CNT).
    L'enveloppe UNH/UNT est ajoutée par la classe de base Message.
EN: Three-phase composition: header, line items in insertion order, then
    the summary section (UNS, amounts and tax, CNT control totals). The
    UNH/UNT envelope is added by the Message base class.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum

from edifact_generator.conf import get_setting
from edifact_generator.invoic.item import Item
from edifact_generator.message import Message
from edifact_generator.models.enums import (
    AmountQualifier,
    CommunicationChannel,
    ControlTotal,
    DateQualifier,
    DocumentType,
    PartyRole,
    ReferenceQualifier,
    TextQualifier,
)
from edifact_generator.number import Numeric, convert
from edifact_generator.segments import Segment, SlotValue
from edifact_generator.segments.builders import (
    bgm,
    check_allowed,
    cnt,
    dtm,
    ftx,
    moa,
    rff,
    tax,
    uns,
)
from edifact_generator.segments.parties import (
    PARTY_REFERENCE_QUALIFIERS,
    com,
    cta,
    cux,
    nad,
    party_reference,
)

logger = logging.getLogger(__name__)


class HeaderKey(StrEnum):
    """Clés de l'en-tête INVOIC, dans l'ordre d'émission."""

    INVOICE_NUMBER = "invoice_number"
    INVOICE_DATE = "invoice_date"
    DELIVERY_DATE = "delivery_date"
    REDUCTION_OF_FEES_TEXT = "reduction_of_fees_text"
    EXCLUDING_VAT_TEXT = "excluding_vat_text"
    INVOICE_DESCRIPTION = "invoice_description"
    MANUFACTURER_ADDRESS = "manufacturer_address"
    WHOLESALER_ADDRESS = "wholesaler_address"
    DELIVERY_ADDRESS = "delivery_address"
    SUPPLIER_ADDRESS = "supplier_address"
    SELLER_VAT_NUMBER = "seller_vat_number"
    SELLER_GOV_NUMBER = "seller_gov_number"
    SELLER_COMPANY_NUMBER = "seller_company_number"
    BUYER_ADDRESS = "buyer_address"
    BUYER_VAT_NUMBER = "buyer_vat_number"
    BUYER_GOV_NUMBER = "buyer_gov_number"
    BUYER_COMPANY_NUMBER = "buyer_company_number"
    INVOICE_ADDRESS = "invoice_address"
    INVOICEE_VAT_NUMBER = "invoicee_vat_number"
    INVOICEE_GOV_NUMBER = "invoicee_gov_number"
    INVOICEE_COMPANY_NUMBER = "invoicee_company_number"
    DELIVERY_PARTY_ADDRESS = "delivery_party_address"
    DELIVERY_VAT_NUMBER = "delivery_vat_number"
    DELIVERY_GOV_NUMBER = "delivery_gov_number"
    DELIVERY_COMPANY_NUMBER = "delivery_company_number"
    CONTACT_PERSON = "contact_person"
    MAIL_ADDRESS = "mail_address"
    PHONE_NUMBER = "phone_number"
    FAX_NUMBER = "fax_number"
    VAT_NUMBER = "vat_number"
    CURRENCY = "currency"


class TrailerKey(StrEnum):
    """Clés du récapitulatif INVOIC (après UNS)."""

    INVOICE_REFERENCE = "invoice_reference"
    TOTAL_POSITIONS_AMOUNT = "total_positions_amount"
    BASIS_AMOUNT = "basis_amount"
    TAXABLE_AMOUNT = "taxable_amount"
    PAYABLE_AMOUNT = "payable_amount"
    TOTAL_AMOUNT = "total_amount"
    TAX = "tax"
    TAX_AMOUNT = "tax_amount"


TRAILER_ORDER: tuple[str, ...] = (
    TrailerKey.INVOICE_REFERENCE,
    TrailerKey.TOTAL_POSITIONS_AMOUNT,
    TrailerKey.BASIS_AMOUNT,
    TrailerKey.TAXABLE_AMOUNT,
    TrailerKey.PAYABLE_AMOUNT,
    TrailerKey.TOTAL_AMOUNT,
    TrailerKey.TAX,
    TrailerKey.TAX_AMOUNT,
)

# Ordre historique : MOA 124 avant et après le TAX (DUPLICATE_TAX_AMOUNT)
LEGACY_TRAILER_ORDER: tuple[str, ...] = (
    TrailerKey.INVOICE_REFERENCE,
    TrailerKey.TOTAL_POSITIONS_AMOUNT,
    TrailerKey.BASIS_AMOUNT,
    TrailerKey.TAXABLE_AMOUNT,
    TrailerKey.PAYABLE_AMOUNT,
    TrailerKey.TOTAL_AMOUNT,
    TrailerKey.TAX_AMOUNT,
    TrailerKey.TAX,
    TrailerKey.TAX_AMOUNT,
)

INVOICE_DOCUMENT_TYPES: tuple[str, ...] = tuple(DocumentType)

_ADDRESS_KEYS: dict[PartyRole, HeaderKey] = {
    PartyRole.MANUFACTURER: HeaderKey.MANUFACTURER_ADDRESS,
    PartyRole.WHOLESALER: HeaderKey.WHOLESALER_ADDRESS,
    PartyRole.DELIVERY: HeaderKey.DELIVERY_ADDRESS,
    PartyRole.SUPPLIER: HeaderKey.SUPPLIER_ADDRESS,
    PartyRole.BUYER: HeaderKey.BUYER_ADDRESS,
    PartyRole.INVOICEE: HeaderKey.INVOICE_ADDRESS,
    PartyRole.DELIVERY_PARTY: HeaderKey.DELIVERY_PARTY_ADDRESS,
}

_PARTY_REFERENCE_KEYS: dict[PartyRole, dict[ReferenceQualifier, HeaderKey]] = {
    PartyRole.SUPPLIER: {
        ReferenceQualifier.VAT: HeaderKey.SELLER_VAT_NUMBER,
        ReferenceQualifier.GOVERNMENT: HeaderKey.SELLER_GOV_NUMBER,
        ReferenceQualifier.COMPANY_REGISTRATION: HeaderKey.SELLER_COMPANY_NUMBER,
    },
    PartyRole.BUYER: {
        ReferenceQualifier.VAT: HeaderKey.BUYER_VAT_NUMBER,
        ReferenceQualifier.GOVERNMENT: HeaderKey.BUYER_GOV_NUMBER,
        ReferenceQualifier.COMPANY_REGISTRATION: HeaderKey.BUYER_COMPANY_NUMBER,
    },
    PartyRole.INVOICEE: {
        ReferenceQualifier.VAT: HeaderKey.INVOICEE_VAT_NUMBER,
        ReferenceQualifier.GOVERNMENT: HeaderKey.INVOICEE_GOV_NUMBER,
        ReferenceQualifier.COMPANY_REGISTRATION: HeaderKey.INVOICEE_COMPANY_NUMBER,
    },
    PartyRole.DELIVERY_PARTY: {
        ReferenceQualifier.VAT: HeaderKey.DELIVERY_VAT_NUMBER,
        ReferenceQualifier.GOVERNMENT: HeaderKey.DELIVERY_GOV_NUMBER,
        ReferenceQualifier.COMPANY_REGISTRATION: HeaderKey.DELIVERY_COMPANY_NUMBER,
    },
}


def _item_quantity(item: Item) -> int:
    """Quantité entière d'une ligne (0 si la ligne n'a pas de QTY)."""
    segment = item.quantity
    if segment is None:
        return 0
    return int(Decimal(segment[1][1]))  # type: ignore[arg-type]


class Invoic(Message):
    """Message INVOIC D96A.

    FR: Les setters valident et construisent chaque segment, puis le
        stockent dans son slot ; compose() assemble en-tête, lignes et
        récapitulatif sans modifier l'état, et peut donc être rappelé.
    EN: Setters validate and build each segment, then store it in its
        slot; compose() assembles header, items and summary without
        mutating state.
    """

    KEY_ORDER = tuple(HeaderKey)
    EXTRA_KEYS = tuple(TrailerKey)

    def __init__(
        self,
        message_id: str | None = None,
        identifier: str = "INVOIC",
        version: str = "D",
        release: str = "96A",
        controlling_agency: str | None = None,
        association: str | None = None,
    ) -> None:
        super().__init__(
            identifier=identifier,
            version=version,
            release=release,
            controlling_agency=controlling_agency,
            message_id=message_id,
            association=association,
        )
        self._items: list[Item] = []

    # --- Lignes ---

    def add_item(self, item: Item) -> Invoic:
        """Ajoute une ligne d'article (composée dans l'ordre d'ajout)."""
        self._items.append(item)
        return self

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    # --- Identification et dates ---

    def set_invoice_number(
        self,
        invoice_number: str,
        document_type: str = DocumentType.INVOICE,
    ) -> Invoic:
        """Numéro et type de document (BGM).

        Raises:
            DisallowedCodeError: Si le type n'est pas l'un des cinq types
                INVOIC autorisés (le slot n'est pas modifié).
        """
        segment = bgm(invoice_number, document_type, INVOICE_DOCUMENT_TYPES)
        self._set_slot(HeaderKey.INVOICE_NUMBER, segment)
        return self

    def set_invoice_date(self, invoice_date: date | datetime | str) -> Invoic:
        """Date de facture (DTM 137)."""
        self._set_slot(HeaderKey.INVOICE_DATE, dtm(invoice_date, DateQualifier.INVOICE_DATE))
        return self

    def set_delivery_date(self, delivery_date: date | datetime | str) -> Invoic:
        """Date de livraison (DTM 35)."""
        self._set_slot(HeaderKey.DELIVERY_DATE, dtm(delivery_date, DateQualifier.DELIVERY_DATE))
        return self

    # --- Textes ---

    def set_reduction_of_fees_text(self, text: str) -> Invoic:
        """Mention de réduction de frais (FTX OSI / HAE)."""
        self._set_slot(
            HeaderKey.REDUCTION_OF_FEES_TEXT,
            ftx(text, TextQualifier.ADDITIONAL_INFORMATION, "HAE"),
        )
        return self

    def set_regulatory_text(self, text: str, corporate: str, amount: Numeric) -> Invoic:
        """Mention réglementaire (FTX REG).

        FR: Partage le slot de la mention de réduction de frais : le
            dernier appel l'emporte.
        EN: Shares the reduction-of-fees slot: the last call wins.
        """
        self._set_slot(
            HeaderKey.REDUCTION_OF_FEES_TEXT,
            ftx(text, TextQualifier.REGULATORY, "", corporate, convert(amount, 2)),
        )
        return self

    def set_excluding_vat_text(self, text: str) -> Invoic:
        """Mention d'exonération de TVA (FTX TXD)."""
        self._set_slot(HeaderKey.EXCLUDING_VAT_TEXT, ftx(text, TextQualifier.TAX_DECLARATION))
        return self

    def set_invoice_description(self, text: str) -> Invoic:
        """Description libre de la facture (FTX OSI)."""
        self._set_slot(
            HeaderKey.INVOICE_DESCRIPTION,
            ftx(text, TextQualifier.ADDITIONAL_INFORMATION),
        )
        return self

    # --- Parties ---

    def set_party_address(
        self,
        role: str,
        party_id: str = "",
        name: str = "",
        street: str = "",
        city: str = "",
        postal_code: str = "",
        country_code: str = "",
    ) -> Invoic:
        """Nom et adresse d'une partie (NAD).

        Raises:
            DisallowedCodeError: Si le rôle n'est pas prévu par INVOIC.
        """
        role = check_allowed(role, _ADDRESS_KEYS)
        segment = nad(role, party_id, name, street, city, postal_code, country_code)
        self._set_slot(_ADDRESS_KEYS[PartyRole(role)], segment)
        return self

    def set_party_reference(self, role: str, qualifier: str, value: str) -> Invoic:
        """Référence d'une partie : TVA (VA), administrative (GN) ou société (XA).

        Raises:
            DisallowedCodeError: Si le rôle ou le qualifiant n'est pas prévu.
        """
        role = check_allowed(role, _PARTY_REFERENCE_KEYS)
        qualifier = check_allowed(qualifier, PARTY_REFERENCE_QUALIFIERS)
        key = _PARTY_REFERENCE_KEYS[PartyRole(role)][ReferenceQualifier(qualifier)]
        self._set_slot(key, party_reference(qualifier, value))
        return self

    def set_vat_number(self, vat_number: str) -> Invoic:
        """Numéro de TVA du message (RFF VA)."""
        self._set_slot(HeaderKey.VAT_NUMBER, rff(ReferenceQualifier.VAT, vat_number))
        return self

    # --- Contact ---

    def set_contact_person(self, name: str) -> Invoic:
        """Interlocuteur (CTA IC)."""
        self._set_slot(HeaderKey.CONTACT_PERSON, cta(name))
        return self

    def set_mail_address(self, mail: str) -> Invoic:
        """Adresse e-mail (COM EM)."""
        self._set_slot(HeaderKey.MAIL_ADDRESS, com(mail, CommunicationChannel.EMAIL))
        return self

    def set_phone_number(self, phone: str) -> Invoic:
        """Téléphone (COM TE)."""
        self._set_slot(HeaderKey.PHONE_NUMBER, com(phone, CommunicationChannel.PHONE))
        return self

    def set_fax_number(self, fax: str) -> Invoic:
        """Fax (COM FX)."""
        self._set_slot(HeaderKey.FAX_NUMBER, com(fax, CommunicationChannel.FAX))
        return self

    def set_currency(self, currency: str) -> Invoic:
        """Devise de facturation (CUX)."""
        self._set_slot(HeaderKey.CURRENCY, cux(currency))
        return self

    # --- Récapitulatif ---

    def set_invoice_reference(self, reference: str) -> Invoic:
        """Référence de facture (RFF IV)."""
        self._set_slot(TrailerKey.INVOICE_REFERENCE, rff(ReferenceQualifier.INVOICE, reference))
        return self

    def set_total_positions_amount(self, amount: Numeric) -> Invoic:
        """Total des lignes (MOA 79)."""
        self._set_slot(
            TrailerKey.TOTAL_POSITIONS_AMOUNT,
            moa(AmountQualifier.TOTAL_LINE_ITEMS, amount),
        )
        return self

    def set_basis_amount(self, amount: Numeric) -> Invoic:
        """Montant de base (MOA 56)."""
        self._set_slot(TrailerKey.BASIS_AMOUNT, moa(AmountQualifier.BASIS, amount))
        return self

    def set_taxable_amount(self, amount: Numeric) -> Invoic:
        """Base imposable (MOA 125)."""
        self._set_slot(TrailerKey.TAXABLE_AMOUNT, moa(AmountQualifier.TAXABLE, amount))
        return self

    def set_payable_amount(self, amount: Numeric) -> Invoic:
        """Montant à payer (MOA 9)."""
        self._set_slot(TrailerKey.PAYABLE_AMOUNT, moa(AmountQualifier.PAYABLE, amount))
        return self

    def set_total_amount(self, amount: Numeric) -> Invoic:
        """Montant total (MOA 128)."""
        self._set_slot(TrailerKey.TOTAL_AMOUNT, moa(AmountQualifier.TOTAL, amount))
        return self

    def set_tax(self, rate: Numeric, amount: Numeric) -> Invoic:
        """Taxe du récapitulatif (TAX 7 VAT) et son montant (MOA 124).

        Args:
            rate: Taux de TVA en % (formaté sans décimale).
            amount: Montant de TVA (formaté à 2 décimales).
        """
        tax_segment = tax(amount, rate)
        tax_amount = moa(AmountQualifier.TAX, amount)
        self._set_slot(TrailerKey.TAX, tax_segment)
        self._set_slot(TrailerKey.TAX_AMOUNT, tax_amount)
        return self

    # --- Lecture ---

    @property
    def invoice_number(self) -> SlotValue | None:
        return self.get_slot(HeaderKey.INVOICE_NUMBER)

    @property
    def invoice_date(self) -> SlotValue | None:
        return self.get_slot(HeaderKey.INVOICE_DATE)

    @property
    def delivery_date(self) -> SlotValue | None:
        return self.get_slot(HeaderKey.DELIVERY_DATE)

    @property
    def invoice_description(self) -> SlotValue | None:
        return self.get_slot(HeaderKey.INVOICE_DESCRIPTION)

    @property
    def total_positions_amount(self) -> SlotValue | None:
        return self.get_slot(TrailerKey.TOTAL_POSITIONS_AMOUNT)

    @property
    def payable_amount(self) -> SlotValue | None:
        return self.get_slot(TrailerKey.PAYABLE_AMOUNT)

    @property
    def tax_amount(self) -> SlotValue | None:
        return self.get_slot(TrailerKey.TAX_AMOUNT)

    # --- Composition ---

    def total_quantity(self) -> int:
        """Somme entière des quantités des lignes (CNT 1)."""
        return sum(_item_quantity(item) for item in self._items)

    def trailer_keys(self) -> tuple[str, ...]:
        """Ordre des clés du récapitulatif selon DUPLICATE_TAX_AMOUNT."""
        if get_setting("DUPLICATE_TAX_AMOUNT"):
            return LEGACY_TRAILER_ORDER
        return TRAILER_ORDER

    def header_keys(self) -> tuple[str, ...]:
        """Ordre des clés de l'en-tête.

        FR: Avec HEADER_INVOICE_REFERENCE, la référence de facture (RFF IV)
            est aussi émise juste après le BGM, comme dans l'ordre historique.
        EN: With HEADER_INVOICE_REFERENCE, RFF IV is also emitted right after
            BGM, as in the historic order.
        """
        if get_setting("HEADER_INVOICE_REFERENCE"):
            return (HeaderKey.INVOICE_NUMBER, TrailerKey.INVOICE_REFERENCE, *self.KEY_ORDER[1:])
        return self.KEY_ORDER

    def compose_content(self) -> list[Segment]:
        """En-tête, lignes puis récapitulatif (hors UNH/UNT)."""
        segments = self.compose_by_keys(self.header_keys())

        for item in self._items:
            segments.extend(item.compose())

        segments.append(uns())
        segments.extend(self.compose_by_keys(self.trailer_keys()))
        segments.append(cnt(ControlTotal.TOTAL_QUANTITY, self.total_quantity()))
        segments.append(cnt(ControlTotal.LINE_COUNT, len(self._items)))

        logger.debug(
            "INVOIC %s composé : %d segments, %d lignes",
            self.message_id,
            len(segments),
            len(self._items),
        )
        return segments
