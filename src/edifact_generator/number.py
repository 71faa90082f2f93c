"""Formatage des valeurs numériques EDIFACT.

FR: Convertit un entier, un flottant, un Decimal ou une chaîne numérique
    en représentation à virgule fixe : exactement `decimals` chiffres après
    le point, sans séparateur de milliers, signe explicite uniquement pour
    les négatifs, arrondi au demi supérieur en valeur absolue.
EN: Converts an int, float, Decimal or numeric string to a fixed-point
    string with exactly `decimals` digits, no grouping, explicit negative
    sign only, rounding half away from zero.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from edifact_generator.errors import InvalidNumericInputError

Numeric = int | float | Decimal | str


def convert(value: Numeric, decimals: int = 3) -> str:
    """Formate une valeur numérique avec un nombre fixe de décimales.

    Args:
        value: Valeur à formater (int, float, Decimal ou chaîne numérique).
        decimals: Nombre de décimales (0 pour taux et quantités, 2 pour
            montants, 3 pour prix unitaires).

    Returns:
        La chaîne formatée, ex. convert(12.345, 2) == "12.35".

    Raises:
        InvalidNumericInputError: Si la valeur n'est pas numérique.
        ValueError: Si decimals est négatif.
    """
    if decimals < 0:
        msg = f"Nombre de décimales négatif : {decimals}"
        raise ValueError(msg)

    number = _to_decimal(value)
    with localcontext() as ctx:
        # Précision suffisante pour tous les chiffres entiers plus les décimales
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        rounded = number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)

    # Pas de zéro négatif ("-0.00")
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return f"{rounded:f}"


def _to_decimal(value: object) -> Decimal:
    """Interprète la valeur comme un Decimal fini."""
    if isinstance(value, bool):
        raise InvalidNumericInputError(value)
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int | float):
        # str() donne la représentation la plus courte du flottant (12.345 et non 12.3449…)
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidNumericInputError(value) from exc
    else:
        raise InvalidNumericInputError(value)

    if not number.is_finite():
        raise InvalidNumericInputError(value)
    return number
