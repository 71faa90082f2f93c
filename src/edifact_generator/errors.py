"""Hiérarchie d'exceptions pour la génération EDIFACT.

FR: Exceptions typées levées lors de la construction des segments :
    code hors liste autorisée, valeur numérique non interprétable.
    Aucune n'est journalisée ni absorbée par le package.
EN: Typed exceptions raised while building segments: code outside an
    allow-list, value that cannot be read as a number.
"""

from collections.abc import Iterable


class EdifactError(Exception):
    """Erreur de base pour toutes les opérations de génération EDIFACT.

    FR: Classe parente de toutes les exceptions du package.
    EN: Base class for all package exceptions.
    """


class DisallowedCodeError(EdifactError):
    """Code hors de la liste des valeurs autorisées.

    FR: Levée par un setter quand le code fourni (type de document,
        qualifiant de référence, rôle de partie) n'appartient pas à la
        liste énumérée pour ce champ. Le champ n'est pas modifié.
    EN: Raised by a setter when the supplied code is not part of the
        enumerated allow-list for that field. The field is left untouched.
    """

    def __init__(self, code: object, allowed: Iterable[str]) -> None:
        self.code = code
        self.allowed: tuple[str, ...] = tuple(str(a) for a in allowed)
        super().__init__(
            f"Code non autorisé : {code!r}. "
            f"Codes autorisés : {', '.join(self.allowed)}"
        )


class InvalidNumericInputError(EdifactError, ValueError):
    """Valeur impossible à interpréter comme un nombre.

    FR: Levée par le formateur numérique (et donc par le builder ou le
        setter qui l'appelle) pour une chaîne non numérique, None, NaN
        ou l'infini.
    EN: Raised by the numeric formatter for non-numeric strings, None,
        NaN or infinity.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Valeur numérique invalide : {value!r}")
