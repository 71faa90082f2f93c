"""Segments partagés : parties, références, devise et contacts.

FR: Helpers réutilisables par tout type de message (INVOIC, ORDERS,
    DESADV…) : nom et adresse (NAD), références de partie (RFF VA/GN/XA),
    devise (CUX), interlocuteur (CTA) et moyens de communication (COM).
    Les entités les appellent explicitement depuis leurs setters.
EN: Reusable helpers for any message type: name and address, party
    references, currency, contact person and communication channels.
"""

from edifact_generator.models.enums import CommunicationChannel, ReferenceQualifier
from edifact_generator.segments import Segment
from edifact_generator.segments.builders import check_allowed, rff, split_text

# Longueur d'une ligne de nom ou de rue (3036 / 3042)
NAME_LINE_LENGTH = 35

PARTY_REFERENCE_QUALIFIERS = (
    ReferenceQualifier.VAT,
    ReferenceQualifier.GOVERNMENT,
    ReferenceQualifier.COMPANY_REGISTRATION,
)


def nad(
    role: str,
    party_id: str = "",
    name: str = "",
    street: str = "",
    city: str = "",
    postal_code: str = "",
    country_code: str = "",
    code_list_agency: str = "9",
) -> Segment:
    """Segment NAD (nom et adresse).

    FR: Le nom (5 lignes) et la rue (4 lignes) sont découpés en lignes de
        35 caractères. L'agence 9 désigne un GLN (EAN).
    EN: Name (5 lines) and street (4 lines) are split into 35-character
        lines. Agency 9 stands for a GLN.
    """
    return (
        "NAD",
        str(role),
        (party_id, "", code_list_agency if party_id else ""),
        "",
        split_text(name, NAME_LINE_LENGTH, 5),
        split_text(street, NAME_LINE_LENGTH, 4),
        city,
        "",
        postal_code,
        country_code,
    )


def party_reference(qualifier: str, value: str) -> Segment:
    """Référence d'une partie (RFF VA, GN ou XA).

    Raises:
        DisallowedCodeError: Si le qualifiant n'est pas VA, GN ou XA.
    """
    qualifier = check_allowed(qualifier, PARTY_REFERENCE_QUALIFIERS)
    return rff(qualifier, value)


def cux(currency: str, qualifier: str = "2", usage: str = "4") -> Segment:
    """Segment CUX (devise de référence, usage facturation)."""
    return ("CUX", (qualifier, currency.upper(), usage))


def cta(name: str, function: str = "IC") -> Segment:
    """Segment CTA (interlocuteur, IC = contact information)."""
    return ("CTA", function, ("", name))


def com(value: str, channel: CommunicationChannel | str) -> Segment:
    """Segment COM (e-mail, téléphone ou fax)."""
    channel = check_allowed(channel, tuple(CommunicationChannel))
    return ("COM", (value, channel))
