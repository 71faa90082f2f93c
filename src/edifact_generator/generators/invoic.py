"""Générateur INVOIC D96A.

FR: Traduit un modèle Invoice en message Invoic : en-tête (BGM, DTM,
    FTX, NAD/RFF par partie, CTA/COM, CUX), une ligne d'article par
    InvoiceLine, puis le récapitulatif (MOA 79/125/9/128, TAX, MOA 124).
EN: Maps an Invoice model onto an Invoic message: header, one item per
    invoice line, then the summary amounts and tax.
"""

import logging

from edifact_generator.conf import get_setting
from edifact_generator.generators.base import BaseGenerator, GenerationResult
from edifact_generator.invoic import Invoic, Item
from edifact_generator.models.enums import PartyRole, ReferenceQualifier
from edifact_generator.models.invoice import Invoice, InvoiceLine
from edifact_generator.models.party import Party

logger = logging.getLogger(__name__)


class InvoicGenerator(BaseGenerator):
    """Générateur de messages INVOIC.

    FR: Les totaux du récapitulatif sont calculés par le modèle Invoice ;
        le total des quantités et le nombre de lignes (CNT) par le message.
    EN: Summary totals come from the Invoice model; CNT totals are
        computed by the message itself.
    """

    def generate(self, invoice: Invoice, message_id: str | None = None) -> GenerationResult:
        """Génère le message INVOIC complet."""
        message = self.build_message(invoice, message_id=message_id)
        segments = message.compose()

        logger.info(
            "Génération INVOIC %s type %s pour facture %s (%d lignes)",
            message.message_id,
            invoice.type_code,
            invoice.number,
            len(invoice.lines),
        )
        return GenerationResult(segments=segments, message_reference=message.message_id)

    def build_message(self, invoice: Invoice, message_id: str | None = None) -> Invoic:
        """Construit l'entité Invoic renseignée."""
        message = Invoic(message_id=message_id, association=self.association)
        self._build_header(message, invoice)
        self._build_parties(message, invoice)
        for idx, line in enumerate(invoice.lines, start=1):
            message.add_item(self._build_item(line, idx, invoice))
        self._build_summary(message, invoice)
        return message

    # --- En-tête ---

    def _build_header(self, message: Invoic, invoice: Invoice) -> None:
        """Identification, dates, textes et devise."""
        message.set_invoice_number(invoice.number, invoice.type_code)
        message.set_invoice_date(invoice.issue_date)
        if invoice.delivery_date:
            message.set_delivery_date(invoice.delivery_date)
        if invoice.excluding_vat_text:
            message.set_excluding_vat_text(invoice.excluding_vat_text)
        if invoice.description:
            message.set_invoice_description(invoice.description)
        message.set_currency(invoice.currency or str(get_setting("DEFAULT_CURRENCY")))

    def _build_parties(self, message: Invoic, invoice: Invoice) -> None:
        """Parties (NAD + références) et interlocuteur."""
        self._build_party(message, PartyRole.SUPPLIER, invoice.supplier)
        self._build_party(message, PartyRole.BUYER, invoice.buyer)
        if invoice.invoicee:
            self._build_party(message, PartyRole.INVOICEE, invoice.invoicee)
        if invoice.delivery_party:
            self._build_party(message, PartyRole.DELIVERY_PARTY, invoice.delivery_party)

        if invoice.contact:
            contact = invoice.contact
            message.set_contact_person(contact.name)
            if contact.email:
                message.set_mail_address(contact.email)
            if contact.phone:
                message.set_phone_number(contact.phone)
            if contact.fax:
                message.set_fax_number(contact.fax)

    def _build_party(self, message: Invoic, role: PartyRole, party: Party) -> None:
        """NAD d'une partie puis ses références RFF renseignées."""
        message.set_party_address(
            role,
            party_id=party.gln or "",
            name=party.name,
            street=party.address.street,
            city=party.address.city,
            postal_code=party.address.postal_code,
            country_code=party.address.country_code,
        )
        references = (
            (ReferenceQualifier.VAT, party.vat_number),
            (ReferenceQualifier.GOVERNMENT, party.government_number),
            (ReferenceQualifier.COMPANY_REGISTRATION, party.company_number),
        )
        for qualifier, value in references:
            if value:
                message.set_party_reference(role, qualifier, value)

    # --- Lignes ---

    def _build_item(self, line: InvoiceLine, idx: int, invoice: Invoice) -> Item:
        """Construit la ligne d'article d'une InvoiceLine."""
        item = Item()
        position = line.position if line.position is not None else idx
        item.set_position(position, line.ean or "")
        if line.supplier_article_number:
            item.set_supplier_article_number(line.supplier_article_number)
        item.set_product_description(line.description)
        exponent = line.quantity.as_tuple().exponent
        decimals = -exponent if isinstance(exponent, int) and exponent < 0 else 0
        item.set_quantity(line.quantity, unit=line.unit, decimals=decimals)
        if line.note:
            item.set_invoice_description(line.note)
        if line.gross_price is not None:
            item.set_gross_price(line.gross_price)
        item.set_net_price(line.unit_price)
        item.set_tax(line.line_total_excl_tax, invoice.vat_rate)
        for entry in line.discounts:
            item.add_discount(entry.amount, entry.percent, entry.name, entry.qualifier)
        return item

    # --- Récapitulatif ---

    def _build_summary(self, message: Invoic, invoice: Invoice) -> None:
        """Montants du récapitulatif et taxe."""
        if invoice.reference:
            message.set_invoice_reference(invoice.reference)
        message.set_total_positions_amount(invoice.total_excl_tax)
        message.set_taxable_amount(invoice.total_excl_tax)
        message.set_payable_amount(invoice.total_incl_tax)
        message.set_total_amount(invoice.total_incl_tax)
        message.set_tax(invoice.vat_rate, invoice.total_vat)
