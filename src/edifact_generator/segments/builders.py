"""Builders de segments EDIFACT D96A.

FR: Fonctions pures : une valeur métier (et des paramètres fixes) en
    entrée, un segment canonique en sortie. Aucune ne modifie l'état d'une
    entité ; les setters stockent le résultat dans un slot.
EN: Pure functions turning a business value (plus fixed parameters) into
    one canonical segment tuple. Setters store the result in a slot.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import NamedTuple

from edifact_generator.conf import get_setting
from edifact_generator.errors import DisallowedCodeError
from edifact_generator.models.enums import (
    AmountQualifier,
    DateFormat,
    ItemNumberType,
)
from edifact_generator.number import Numeric, convert
from edifact_generator.segments import Segment

# Longueur maximale d'une ligne de texte (C108 / 4440)
TEXT_LINE_LENGTH = 70
# Nombre maximal de lignes de texte dans un FTX
TEXT_LINE_COUNT = 5


class DiscountSegments(NamedTuple):
    """Triplet ALC / PCD / MOA d'une remise."""

    allowance: Segment
    percentage: Segment
    amount: Segment


def check_allowed(code: str, allowed: Iterable[str]) -> str:
    """Vérifie qu'un code appartient à la liste autorisée.

    Raises:
        DisallowedCodeError: Si le code n'est pas dans la liste.
    """
    allowed = tuple(allowed)
    if code not in allowed:
        raise DisallowedCodeError(code, allowed)
    return str(code)


def split_text(text: str, size: int, limit: int) -> tuple[str, ...]:
    """Découpe un texte en au plus `limit` morceaux de `size` caractères."""
    if not text:
        return ("",)
    chunks = tuple(text[i : i + size] for i in range(0, len(text), size))
    return chunks[:limit]


# --- En-tête ---


def bgm(
    document_number: str,
    document_type: str,
    allowed: Iterable[str],
    function_code: str | None = None,
) -> Segment:
    """Segment BGM (début de message).

    FR: Valide le type de document contre la liste autorisée du type de
        message avant de construire le segment.
    EN: Validates the document type against the message type's allow-list.

    Raises:
        DisallowedCodeError: Si le type de document n'est pas autorisé.
    """
    document_type = check_allowed(document_type, allowed)
    if function_code is None:
        function_code = str(get_setting("MESSAGE_FUNCTION"))
    return ("BGM", document_type, document_number, function_code)


def dtm(value: date | datetime | str, qualifier: str, format_code: str | None = None) -> Segment:
    """Segment DTM (date/heure).

    FR: Une date est formatée en CCYYMMDD (102), un datetime en
        CCYYMMDDHHMM (203). Une chaîne est reprise telle quelle.
    EN: date → 102, datetime → 203, strings are taken verbatim.
    """
    if isinstance(value, datetime):
        text = value.strftime("%Y%m%d%H%M")
        default_format = DateFormat.DATE_TIME
    elif isinstance(value, date):
        text = value.strftime("%Y%m%d")
        default_format = DateFormat.DATE
    else:
        text = str(value)
        default_format = DateFormat.DATE_TIME if len(text) == 12 else DateFormat.DATE
    return ("DTM", (str(qualifier), text, str(format_code or default_format)))


def ftx(text: str, qualifier: str, reference: str = "", *extra_lines: str) -> Segment:
    """Segment FTX (texte libre).

    FR: Le texte est découpé en lignes de 70 caractères ; `extra_lines`
        ajoute des lignes complémentaires (ex. identifiant de société et
        montant d'une mention réglementaire). Le segment porte 5 lignes au
        plus : le texte est tronqué pour laisser la place aux lignes
        complémentaires, qui ne sont jamais perdues.
    EN: Text is split into 70-character lines and truncated so that the
        extra lines always fit within the 5-line limit.

    Raises:
        ValueError: Si plus de 4 lignes complémentaires sont fournies.
    """
    if len(extra_lines) >= TEXT_LINE_COUNT:
        msg = (
            f"Trop de lignes complémentaires FTX : {len(extra_lines)} "
            f"(maximum {TEXT_LINE_COUNT - 1})"
        )
        raise ValueError(msg)
    lines = split_text(text, TEXT_LINE_LENGTH, TEXT_LINE_COUNT - len(extra_lines))
    return ("FTX", str(qualifier), "", reference, lines + tuple(extra_lines))


def rff(qualifier: str, value: str) -> Segment:
    """Segment RFF (référence)."""
    return ("RFF", (str(qualifier), value))


# --- Montants, prix, taxes ---


def moa(qualifier: str, amount: Numeric, decimals: int = 2) -> Segment:
    """Segment MOA (montant monétaire, 2 décimales par défaut)."""
    return ("MOA", (str(qualifier), convert(amount, decimals)))


def pri(
    qualifier: str,
    value: Numeric,
    decimals: int = 3,
    price_base: int = 1,
    price_base_unit: str | None = None,
) -> Segment:
    """Segment PRI (prix unitaire, 3 décimales par défaut)."""
    if price_base_unit is None:
        price_base_unit = str(get_setting("PRICE_BASE_UNIT"))
    return (
        "PRI",
        (str(qualifier), convert(value, decimals), "", "", str(price_base), str(price_base_unit)),
    )


def tax(base: Numeric, rate: Numeric, tax_type: str = "VAT", category: str = "S") -> Segment:
    """Segment TAX (détail de taxe).

    FR: Base formatée à 2 décimales, taux à 0 décimale, catégorie fixe.
    EN: Base with 2 decimals, rate with 0 decimals, fixed category.
    """
    return (
        "TAX",
        "7",
        str(tax_type),
        "",
        convert(base, 2),
        ("", "", "", convert(rate, 0)),
        str(category),
    )


def discount(
    value: Numeric,
    percent: Numeric,
    name: str = "",
    qualifier: str = "TD",
) -> DiscountSegments:
    """Triplet ALC / PCD / MOA d'une remise.

    FR: Le montant (MOA 204) est toujours émis en valeur absolue, quel que
        soit le signe de la valeur fournie.
    EN: The amount (MOA 204) is always emitted as an absolute value.
    """
    amount = convert(value, 2).lstrip("-")
    return DiscountSegments(
        allowance=("ALC", "A", "", "2", "1", (str(qualifier), "", "", name, "")),
        percentage=("PCD", ("1", convert(percent, 0))),
        amount=("MOA", (str(AmountQualifier.DISCOUNT), amount)),
    )


# --- Lignes d'article ---


def lin(position: int | str, article_number: str = "", number_type: str = ItemNumberType.EAN) -> Segment:
    """Segment LIN (ligne d'article)."""
    if not article_number:
        return ("LIN", str(position))
    return ("LIN", str(position), "", (article_number, str(number_type)))


def pia(article_number: str, number_type: str = ItemNumberType.SUPPLIER_ARTICLE) -> Segment:
    """Segment PIA (identification complémentaire, qualifiant 5)."""
    return ("PIA", "5", (article_number, str(number_type)))


def imd(description: str) -> Segment:
    """Segment IMD (description en texte libre)."""
    return ("IMD", "F", "", ("", "", "", description[:TEXT_LINE_LENGTH]))


def qty(quantity: Numeric, unit: str, qualifier: str, decimals: int = 0) -> Segment:
    """Segment QTY.

    FR: La quantité est le deuxième composant du deuxième élément ;
        le total des quantités du message s'appuie sur cette position.
    EN: The quantity is the second component of the second element.
    """
    return ("QTY", (str(qualifier), convert(quantity, decimals), str(unit)))


# --- Récapitulatif ---


def uns() -> Segment:
    """Segment UNS (séparateur de section détail/récapitulatif)."""
    return ("UNS", "S")


def cnt(qualifier: str, value: int | str) -> Segment:
    """Segment CNT (total de contrôle)."""
    return ("CNT", (str(qualifier), str(value)))
