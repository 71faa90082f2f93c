"""Configuration de la génération EDIFACT.

FR: Paramètres globaux (valeurs par défaut de l'enveloppe UNH, unité de
    base des prix, devise, compatibilité du récapitulatif). Les valeurs
    peuvent être surchargées avec configure() et restaurées avec reset().
EN: Global settings (UNH envelope defaults, price basis unit, currency,
    trailer compatibility). Override with configure(), restore with reset().
"""

from __future__ import annotations

DEFAULTS: dict[str, object] = {
    "CONTROLLING_AGENCY": "UN",
    "ASSOCIATION_CODE": "EAN008",
    "MESSAGE_FUNCTION": "9",
    "PRICE_BASE_UNIT": "PCE",
    "DEFAULT_CURRENCY": "EUR",
    "DUPLICATE_TAX_AMOUNT": False,
    "HEADER_INVOICE_REFERENCE": False,
}

_overrides: dict[str, object] = {}


def _check_name(name: str) -> None:
    if name not in DEFAULTS:
        msg = f"Paramètre EDIFACT inconnu : {name}"
        raise KeyError(msg)


def get_setting(name: str) -> object:
    """Retourne la valeur d'un paramètre.

    FR: Cherche d'abord dans les surcharges, puis dans les défauts.
    EN: Looks up overrides first, then falls back to defaults.
    """
    _check_name(name)
    return _overrides.get(name, DEFAULTS[name])


def configure(**settings: object) -> None:
    """Surcharge un ou plusieurs paramètres.

    Raises:
        KeyError: Si un des paramètres est inconnu (rien n'est modifié).
    """
    for name in settings:
        _check_name(name)
    _overrides.update(settings)


def reset() -> None:
    """Restaure toutes les valeurs par défaut."""
    _overrides.clear()
