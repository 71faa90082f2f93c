"""Énumérations des codes EDIFACT D96A utilisés par INVOIC.

FR: Codes issus des répertoires UNTDID (1001, 2005, 2379, 4451, 5025,
    5125, 3035, 1153, 3155, 6063, 6069, 7143) pour les segments produits.
EN: UNTDID code list values for the segments this package produces.
"""

from enum import StrEnum


class DocumentType(StrEnum):
    """Type de document INVOIC (UNTDID 1001, BGM C002).

    FR: Seuls ces cinq types sont acceptés par set_invoice_number().
    EN: Only these five types are accepted by set_invoice_number().
    """

    INVOICE = "380"
    """Facture commerciale / Commercial invoice"""

    CREDIT_NOTE = "381"
    """Avoir / Credit note"""

    SERVICE_CREDIT = "31e"
    """Avoir de prestation / Service credit"""

    SERVICE_INVOICE = "32e"
    """Facture de prestation / Service invoice"""

    BONUS = "33i"
    """Bonus / Bonus"""


class DateQualifier(StrEnum):
    """Qualifiant de date (UNTDID 2005, DTM C507)."""

    INVOICE_DATE = "137"
    """Date du document / Document date"""

    DELIVERY_DATE = "35"
    """Date de livraison / Delivery date"""


class DateFormat(StrEnum):
    """Format de date (UNTDID 2379)."""

    DATE = "102"
    """CCYYMMDD"""

    DATE_TIME = "203"
    """CCYYMMDDHHMM"""


class TextQualifier(StrEnum):
    """Objet du texte libre (UNTDID 4451, FTX)."""

    ADDITIONAL_INFORMATION = "OSI"
    """Informations complémentaires / Other service information"""

    REGULATORY = "REG"
    """Mention réglementaire / Regulatory information"""

    INVOICE_INSTRUCTION = "INV"
    """Instruction de facturation / Invoice instruction"""

    TAX_DECLARATION = "TXD"
    """Mention fiscale / Tax declaration"""


class AmountQualifier(StrEnum):
    """Qualifiant de montant (UNTDID 5025, MOA C516)."""

    PAYABLE = "9"
    """Montant à payer / Amount due"""

    BASIS = "56"
    """Montant de base / Basis amount"""

    TOTAL_LINE_ITEMS = "79"
    """Total des lignes / Total line items amount"""

    TAX = "124"
    """Montant de taxe / Tax amount"""

    TAXABLE = "125"
    """Base imposable / Taxable amount"""

    TOTAL = "128"
    """Montant total / Total amount"""

    DISCOUNT = "204"
    """Montant de remise / Allowance amount"""


class PriceQualifier(StrEnum):
    """Qualifiant de prix (UNTDID 5125, PRI C509)."""

    NET = "AAA"
    """Prix net / Calculation net"""

    GROSS = "AAB"
    """Prix brut / Calculation gross"""


class PartyRole(StrEnum):
    """Rôle d'une partie (UNTDID 3035, NAD)."""

    MANUFACTURER = "MF"
    """Fabricant / Manufacturer"""

    WHOLESALER = "WS"
    """Grossiste / Wholesaler"""

    DELIVERY = "DP"
    """Lieu de livraison / Delivery party"""

    SUPPLIER = "SU"
    """Fournisseur / Supplier"""

    BUYER = "BY"
    """Acheteur / Buyer"""

    INVOICEE = "IV"
    """Destinataire de la facture / Invoicee"""

    DELIVERY_PARTY = "ST"
    """Destinataire de la marchandise / Ship to"""


class ReferenceQualifier(StrEnum):
    """Qualifiant de référence (UNTDID 1153, RFF C506)."""

    INVOICE = "IV"
    """Numéro de facture de référence / Invoice number"""

    VAT = "VA"
    """Numéro de TVA / VAT registration number"""

    GOVERNMENT = "GN"
    """Référence administrative / Government reference number"""

    COMPANY_REGISTRATION = "XA"
    """Immatriculation de la société / Company registration number"""


class CommunicationChannel(StrEnum):
    """Canal de communication (UNTDID 3155, COM C076)."""

    EMAIL = "EM"
    """Courriel / Electronic mail"""

    PHONE = "TE"
    """Téléphone / Telephone"""

    FAX = "FX"
    """Télécopie / Telefax"""


class QuantityQualifier(StrEnum):
    """Qualifiant de quantité (UNTDID 6063, QTY C186)."""

    INVOICED = "47"
    """Quantité facturée / Invoiced quantity"""

    DELIVERED = "46"
    """Quantité livrée / Delivered quantity"""


class ControlTotal(StrEnum):
    """Qualifiant de total de contrôle (UNTDID 6069, CNT C270)."""

    TOTAL_QUANTITY = "1"
    """Somme des quantités / Algebraic total of quantities"""

    LINE_COUNT = "2"
    """Nombre de lignes / Number of line items"""


class ItemNumberType(StrEnum):
    """Type de numéro d'article (UNTDID 7143)."""

    EAN = "EN"
    """Code EAN / International Article Numbering"""

    SUPPLIER_ARTICLE = "SA"
    """Référence fournisseur / Supplier's article number"""

    BUYER_ARTICLE = "IN"
    """Référence acheteur / Buyer's item number"""
