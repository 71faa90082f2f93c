"""Tests unitaires des builders de segments.

FR: Vérifie la forme exacte des tuples produits (ordre des éléments
    D96A), le formatage numérique par builder et la liste autorisée du BGM.
EN: Verifies exact tuple shapes (D96A element order), per-builder numeric
    formatting and the BGM allow-list.
"""

from datetime import date, datetime

import pytest

from edifact_generator.conf import configure
from edifact_generator.errors import DisallowedCodeError, InvalidNumericInputError
from edifact_generator.invoic.message import INVOICE_DOCUMENT_TYPES
from edifact_generator.models.enums import (
    AmountQualifier,
    DateQualifier,
    DocumentType,
    ItemNumberType,
    PriceQualifier,
    QuantityQualifier,
    ReferenceQualifier,
    TextQualifier,
)
from edifact_generator.segments import is_segment
from edifact_generator.segments.builders import (
    DiscountSegments,
    bgm,
    check_allowed,
    cnt,
    discount,
    dtm,
    ftx,
    imd,
    lin,
    moa,
    pia,
    pri,
    qty,
    rff,
    split_text,
    tax,
    uns,
)


class TestDocumentReference:
    """Tests du segment BGM."""

    def test_bgm_shape(self) -> None:
        assert bgm("A1", "380", INVOICE_DOCUMENT_TYPES) == ("BGM", "380", "A1", "9")

    def test_bgm_accepts_enum(self) -> None:
        segment = bgm("A1", DocumentType.CREDIT_NOTE, INVOICE_DOCUMENT_TYPES)
        assert segment[1] == "381"

    def test_bgm_rejects_unknown_type(self) -> None:
        with pytest.raises(DisallowedCodeError) as exc_info:
            bgm("A1", "999", INVOICE_DOCUMENT_TYPES)
        assert exc_info.value.code == "999"
        assert "380" in exc_info.value.allowed

    def test_bgm_message_function_from_settings(self) -> None:
        configure(MESSAGE_FUNCTION="31")
        assert bgm("A1", "380", INVOICE_DOCUMENT_TYPES)[3] == "31"

    def test_check_allowed_returns_code(self) -> None:
        assert check_allowed("b", ("a", "b")) == "b"


class TestDateTime:
    """Tests du segment DTM."""

    def test_date(self) -> None:
        assert dtm(date(2026, 9, 15), "137") == ("DTM", ("137", "20260915", "102"))

    def test_datetime(self) -> None:
        segment = dtm(datetime(2026, 9, 15, 8, 30), "137")
        assert segment == ("DTM", ("137", "202609150830", "203"))

    def test_string_taken_verbatim(self) -> None:
        assert dtm("20260910", "35") == ("DTM", ("35", "20260910", "102"))

    def test_explicit_format(self) -> None:
        assert dtm("202609", "137", "610") == ("DTM", ("137", "202609", "610"))


class TestFreeText:
    """Tests du segment FTX."""

    def test_simple_text(self) -> None:
        assert ftx("Texte", "OSI") == ("FTX", "OSI", "", "", ("Texte",))

    def test_reference(self) -> None:
        assert ftx("Texte", "OSI", "HAE") == ("FTX", "OSI", "", "HAE", ("Texte",))

    def test_long_text_split_in_lines(self) -> None:
        segment = ftx("x" * 150, "OSI")
        assert segment[4] == ("x" * 70, "x" * 70, "x" * 10)

    def test_extra_lines(self) -> None:
        segment = ftx("Mention", "REG", "", "ACME", "12.50")
        assert segment == ("FTX", "REG", "", "", ("Mention", "ACME", "12.50"))

    def test_at_most_five_lines(self) -> None:
        assert len(ftx("y" * 500, "OSI")[4]) == 5

    def test_long_text_keeps_extra_lines(self) -> None:
        segment = ftx("x" * 300, "REG", "", "CORP42", "12.50")
        assert segment[4] == ("x" * 70, "x" * 70, "x" * 70, "CORP42", "12.50")

    def test_too_many_extra_lines(self) -> None:
        with pytest.raises(ValueError):
            ftx("Texte", "REG", "", "a", "b", "c", "d", "e")

    def test_split_empty_text(self) -> None:
        assert split_text("", 35, 5) == ("",)


class TestAmountsAndPrices:
    """Tests des segments MOA, PRI, TAX et RFF."""

    def test_moa_two_decimals(self) -> None:
        assert moa("79", 100) == ("MOA", ("79", "100.00"))

    def test_moa_invalid_amount(self) -> None:
        with pytest.raises(InvalidNumericInputError):
            moa("9", "beaucoup")

    def test_pri_default(self) -> None:
        segment = pri(PriceQualifier.NET, 100)
        assert segment == ("PRI", ("AAA", "100.000", "", "", "1", "PCE"))

    def test_pri_custom_basis(self) -> None:
        segment = pri("AAB", 9.5, decimals=2, price_base=10, price_base_unit="KGM")
        assert segment == ("PRI", ("AAB", "9.50", "", "", "10", "KGM"))

    def test_pri_unit_from_settings(self) -> None:
        configure(PRICE_BASE_UNIT="KGM")
        assert pri("AAA", 1)[1][5] == "KGM"

    def test_tax(self) -> None:
        assert tax(200, 19) == ("TAX", "7", "VAT", "", "200.00", ("", "", "", "19"), "S")

    def test_tax_rate_rounded_to_integer(self) -> None:
        assert tax("10", "5.5")[5] == ("", "", "", "6")

    def test_rff(self) -> None:
        assert rff("IV", "FA-001") == ("RFF", ("IV", "FA-001"))


class TestDiscount:
    """Tests du triplet de remise."""

    def test_triple(self) -> None:
        result = discount(10, 5, "Promo")
        assert isinstance(result, DiscountSegments)
        assert result.allowance == ("ALC", "A", "", "2", "1", ("TD", "", "", "Promo", ""))
        assert result.percentage == ("PCD", ("1", "5"))
        assert result.amount == ("MOA", ("204", "10.00"))

    def test_negative_value_emitted_as_absolute(self) -> None:
        assert discount(-10, 5, "Promo").amount == ("MOA", ("204", "10.00"))

    def test_custom_qualifier(self) -> None:
        assert discount(1, 1, qualifier="DI").allowance[5][0] == "DI"

    def test_segments_in_order(self) -> None:
        assert [s[0] for s in discount(1, 1)] == ["ALC", "PCD", "MOA"]


class TestItemSegments:
    """Tests des segments LIN, PIA, IMD et QTY."""

    def test_lin_with_article(self) -> None:
        assert lin(1, "4000862141404") == ("LIN", "1", "", ("4000862141404", "EN"))

    def test_lin_position_only(self) -> None:
        assert lin(2) == ("LIN", "2")

    def test_pia(self) -> None:
        assert pia("ART-1") == ("PIA", "5", ("ART-1", "SA"))

    def test_imd(self) -> None:
        assert imd("Vis") == ("IMD", "F", "", ("", "", "", "Vis"))

    def test_qty(self) -> None:
        assert qty(3, "PCE", "47") == ("QTY", ("47", "3", "PCE"))

    def test_qty_decimals(self) -> None:
        assert qty("2.5", "KGM", "47", decimals=1) == ("QTY", ("47", "2.5", "KGM"))


class TestSummarySegments:
    """Tests des segments UNS et CNT."""

    def test_uns(self) -> None:
        assert uns() == ("UNS", "S")

    def test_cnt(self) -> None:
        assert cnt("1", 8) == ("CNT", ("1", "8"))

    def test_is_segment(self) -> None:
        assert is_segment(uns())
        assert not is_segment((uns(), cnt("2", 1)))
        assert not is_segment(())


def _elements(segment: tuple) -> list:
    """Éléments et composants d'un segment, à plat."""
    flat = []
    for element in segment:
        if isinstance(element, tuple):
            flat.extend(element)
        else:
            flat.append(element)
    return flat


class TestPlainStrings:
    """Les segments ne contiennent que des str, même construits avec des enums."""

    @pytest.mark.parametrize(
        "segment",
        [
            bgm("A1", DocumentType.INVOICE, INVOICE_DOCUMENT_TYPES),
            dtm(date(2026, 9, 15), DateQualifier.INVOICE_DATE),
            ftx("Mention", TextQualifier.REGULATORY),
            rff(ReferenceQualifier.INVOICE, "FA-1"),
            moa(AmountQualifier.PAYABLE, 10),
            pri(PriceQualifier.GROSS, 10),
            qty(2, "PCE", QuantityQualifier.INVOICED),
            lin(1, "4006381333931", ItemNumberType.EAN),
            *discount(5, 10, "Promo"),
        ],
    )
    def test_only_plain_str(self, segment: tuple) -> None:
        assert all(type(element) is str for element in _elements(segment))
