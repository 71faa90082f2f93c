"""Ligne d'article d'un message INVOIC.

FR: Accumule les segments d'une ligne (LIN, PIA, IMD, QTY, FTX, PRI,
    TAX, remises ALC/PCD/MOA) et les restitue dans l'ordre du groupe de
    segments 25 de la D96A, quel que soit l'ordre d'appel des setters.
    Les remises sont une liste explicite d'enregistrements, composées
    dans l'ordre d'ajout.
EN: Accumulates one line item's segments and emits them in D96A segment
    group 25 order, regardless of setter call order. Discounts are an
    explicit list of records composed in insertion order.
"""

from __future__ import annotations

from enum import StrEnum

from edifact_generator.composition import SegmentComposer
from edifact_generator.models.enums import (
    ItemNumberType,
    PriceQualifier,
    QuantityQualifier,
    TextQualifier,
)
from edifact_generator.number import Numeric
from edifact_generator.segments import Segment, SlotValue
from edifact_generator.segments.builders import (
    DiscountSegments,
    discount,
    ftx,
    imd,
    lin,
    pia,
    pri,
    qty,
    tax,
)


class ItemKey(StrEnum):
    """Clés de composition d'une ligne, dans l'ordre d'émission."""

    POSITION = "position"
    ADDITIONAL_PRODUCT_ID = "additional_product_id"
    PRODUCT_DESCRIPTION = "product_description"
    QUANTITY = "quantity"
    INVOICE_DESCRIPTION = "invoice_description"
    GROSS_PRICE = "gross_price"
    NET_PRICE = "net_price"
    TAX = "tax"
    DISCOUNTS = "discounts"


class Item(SegmentComposer):
    """Ligne d'article INVOIC.

    FR: Construite par l'appelant puis ajoutée au message avec
        Invoic.add_item(). La quantité (QTY) alimente le total de
        contrôle CNT 1 du message.
    EN: Built by the caller, then passed to Invoic.add_item(). Its QTY
        feeds the message's CNT 1 control total.
    """

    KEY_ORDER = tuple(ItemKey)

    def __init__(self) -> None:
        super().__init__()
        self._discounts: list[DiscountSegments] = []

    # --- Identification ---

    def set_position(
        self,
        position: int | str,
        article_number: str = "",
        number_type: str = ItemNumberType.EAN,
    ) -> Item:
        """Numéro de ligne et article (LIN)."""
        self._set_slot(ItemKey.POSITION, lin(position, article_number, number_type))
        return self

    def set_supplier_article_number(self, article_number: str) -> Item:
        """Référence article fournisseur (PIA 5 / SA)."""
        self._set_slot(
            ItemKey.ADDITIONAL_PRODUCT_ID,
            pia(article_number, ItemNumberType.SUPPLIER_ARTICLE),
        )
        return self

    def set_product_description(self, description: str) -> Item:
        """Désignation de l'article (IMD F)."""
        self._set_slot(ItemKey.PRODUCT_DESCRIPTION, imd(description))
        return self

    def set_quantity(
        self,
        quantity: Numeric,
        unit: str = "PCE",
        qualifier: str = QuantityQualifier.INVOICED,
        decimals: int = 0,
    ) -> Item:
        """Quantité facturée (QTY 47 par défaut)."""
        self._set_slot(ItemKey.QUANTITY, qty(quantity, unit, qualifier, decimals))
        return self

    def set_invoice_description(self, description: str) -> Item:
        """Texte libre de la ligne (FTX INV)."""
        self._set_slot(
            ItemKey.INVOICE_DESCRIPTION,
            ftx(description, TextQualifier.INVOICE_INSTRUCTION),
        )
        return self

    # --- Prix et taxes ---

    def set_gross_price(self, price: Numeric, decimals: int = 3) -> Item:
        """Prix brut unitaire (PRI AAB)."""
        self._set_slot(ItemKey.GROSS_PRICE, pri(PriceQualifier.GROSS, price, decimals))
        return self

    def set_net_price(self, price: Numeric, decimals: int = 3) -> Item:
        """Prix net unitaire (PRI AAA)."""
        self._set_slot(ItemKey.NET_PRICE, pri(PriceQualifier.NET, price, decimals))
        return self

    def set_tax(self, base: Numeric, percent: Numeric = 20, name: str = "VAT") -> Item:
        """Taxe de la ligne (TAX 7)."""
        self._set_slot(ItemKey.TAX, tax(base, percent, name))
        return self

    def add_discount(
        self,
        value: Numeric,
        percent: Numeric,
        name: str = "",
        qualifier: str = "TD",
    ) -> Item:
        """Ajoute une remise (ALC + PCD + MOA 204).

        FR: Chaque appel ajoute un nouveau triplet à la fin de la liste ;
            les remises précédentes ne sont jamais remplacées.
        EN: Each call appends a new triple; earlier discounts are kept.
        """
        record = discount(value, percent, name, qualifier)
        self._discounts.append(record)
        self._set_slot(
            ItemKey.DISCOUNTS,
            tuple(segment for entry in self._discounts for segment in entry),
        )
        return self

    # --- Accès en lecture ---

    @property
    def position(self) -> SlotValue | None:
        return self.get_slot(ItemKey.POSITION)

    @property
    def quantity(self) -> SlotValue | None:
        """Segment QTY : ("QTY", (qualifiant, quantité, unité))."""
        return self.get_slot(ItemKey.QUANTITY)

    @property
    def gross_price(self) -> SlotValue | None:
        return self.get_slot(ItemKey.GROSS_PRICE)

    @property
    def net_price(self) -> SlotValue | None:
        return self.get_slot(ItemKey.NET_PRICE)

    @property
    def tax_info(self) -> SlotValue | None:
        return self.get_slot(ItemKey.TAX)

    @property
    def invoice_description(self) -> SlotValue | None:
        return self.get_slot(ItemKey.INVOICE_DESCRIPTION)

    @property
    def discounts(self) -> tuple[DiscountSegments, ...]:
        """Remises de la ligne, dans l'ordre d'ajout."""
        return tuple(self._discounts)

    def compose(self) -> list[Segment]:
        """Segments de la ligne, dans l'ordre de KEY_ORDER."""
        return self.compose_by_keys()
