"""Tests de la ligne d'article INVOIC.

FR: Vérifie l'ordre de composition de la ligne, la forme de la quantité,
    l'unicité et l'ordre des remises, et la normalisation du signe.
EN: Verifies item composition order, quantity shape, discount ordering
    and uniqueness, and sign normalization.
"""

import pytest

from edifact_generator.errors import InvalidNumericInputError
from edifact_generator.invoic import Item, ItemKey


class TestItemComposition:
    """Tests de compose()."""

    def test_empty_item(self) -> None:
        assert Item().compose() == []

    def test_order_independent_of_setter_calls(self) -> None:
        item = (
            Item()
            .set_net_price(100)
            .set_tax(200, 20)
            .set_quantity(2)
            .set_product_description("Vis inox")
            .set_position(1, "4000862141404")
            .set_gross_price(120)
            .set_supplier_article_number("VIS-8")
            .set_invoice_description("Livraison partielle")
        )
        assert [segment[0] for segment in item.compose()] == [
            "LIN",
            "PIA",
            "IMD",
            "QTY",
            "FTX",
            "PRI",
            "PRI",
            "TAX",
        ]
        prices = [segment for segment in item.compose() if segment[0] == "PRI"]
        assert prices[0][1][0] == "AAB"
        assert prices[1][1][0] == "AAA"

    def test_setters_return_item(self) -> None:
        item = Item()
        assert item.set_quantity(1) is item
        assert item.add_discount(1, 1) is item

    def test_compose_is_repeatable(self) -> None:
        item = Item().set_net_price(10).add_discount(1, 10)
        assert item.compose() == item.compose()
        assert len(item.compose()) == 4

    def test_key_order(self) -> None:
        assert Item.KEY_ORDER[0] == ItemKey.POSITION
        assert Item.KEY_ORDER[-1] == ItemKey.DISCOUNTS


class TestItemFields:
    """Tests des segments construits par les setters."""

    def test_quantity_shape(self) -> None:
        item = Item().set_quantity(2)
        assert item.quantity == ("QTY", ("47", "2", "PCE"))
        assert item.quantity[1][1] == "2"

    def test_quantity_unit_and_qualifier(self) -> None:
        item = Item().set_quantity("1.5", unit="KGM", qualifier="46", decimals=1)
        assert item.quantity == ("QTY", ("46", "1.5", "KGM"))

    def test_net_price(self) -> None:
        assert Item().set_net_price(100).net_price == (
            "PRI",
            ("AAA", "100.000", "", "", "1", "PCE"),
        )

    def test_gross_price_decimals(self) -> None:
        assert Item().set_gross_price(9.99, decimals=2).gross_price[1][1] == "9.99"

    def test_tax(self) -> None:
        assert Item().set_tax("200", 19).tax_info == (
            "TAX",
            "7",
            "VAT",
            "",
            "200.00",
            ("", "", "", "19"),
            "S",
        )

    def test_tax_default_rate(self) -> None:
        assert Item().set_tax(10).tax_info[5][3] == "20"

    def test_position(self) -> None:
        assert Item().set_position(3).position == ("LIN", "3")

    def test_invoice_description(self) -> None:
        assert Item().set_invoice_description("Note").invoice_description == (
            "FTX",
            "INV",
            "",
            "",
            ("Note",),
        )

    def test_invalid_price_leaves_slot_unset(self) -> None:
        item = Item()
        with pytest.raises(InvalidNumericInputError):
            item.set_net_price("cent")
        assert item.net_price is None


class TestDiscounts:
    """Tests des remises."""

    def test_three_segments_per_discount(self) -> None:
        item = Item()
        for n in range(4):
            item.add_discount(n + 1, n, f"Remise {n}")
        segments = item.compose()
        assert len(segments) == 12
        assert [s[0] for s in segments] == ["ALC", "PCD", "MOA"] * 4

    def test_discounts_in_call_order(self) -> None:
        item = Item().add_discount(5, 10, "Première").add_discount(7, 20, "Seconde")
        names = [s[5][3] for s in item.compose() if s[0] == "ALC"]
        assert names == ["Première", "Seconde"]
        amounts = [s[1][1] for s in item.compose() if s[0] == "MOA"]
        assert amounts == ["5.00", "7.00"]

    def test_discounts_are_not_overwritten(self) -> None:
        item = Item().add_discount(5, 10).add_discount(5, 10)
        assert len(item.discounts) == 2

    def test_discounts_per_item(self) -> None:
        first = Item().add_discount(1, 1).add_discount(2, 2)
        second = Item().add_discount(3, 3)
        assert len(first.compose()) == 6
        assert len(second.compose()) == 3
        assert second.compose()[2] == ("MOA", ("204", "3.00"))

    def test_discount_amount_absolute(self) -> None:
        segments = Item().add_discount(-10, 5, "Promo").compose()
        assert segments[2] == ("MOA", ("204", "10.00"))
        assert ("MOA", ("204", "-10.00")) not in segments

    def test_discounts_after_static_slots(self) -> None:
        item = Item().add_discount(1, 1).set_net_price(5)
        assert [s[0] for s in item.compose()] == ["PRI", "ALC", "PCD", "MOA"]
