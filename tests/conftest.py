"""Fixtures partagées pour les tests edifact-generator."""

from datetime import date
from decimal import Decimal

import pytest

from edifact_generator.conf import reset
from edifact_generator.models import (
    Address,
    Contact,
    Discount,
    Invoice,
    InvoiceLine,
    Party,
)


@pytest.fixture(autouse=True)
def _reset_settings():
    """Restaure la configuration par défaut autour de chaque test."""
    reset()
    yield
    reset()


@pytest.fixture
def sample_invoice() -> Invoice:
    """Facture de test avec deux lignes, dont une remisée."""
    return Invoice(
        number="FA-2026-042",
        issue_date=date(2026, 9, 15),
        delivery_date=date(2026, 9, 10),
        supplier=Party(
            name="OptiPaulo SARL",
            gln="3012345000013",
            vat_number="FR12345678901",
            address=Address(
                street="12 rue des Opticiens",
                city="Créteil",
                postal_code="94000",
                country_code="FR",
            ),
        ),
        buyer=Party(
            name="LunettesPlus SA",
            gln="3098765000019",
            vat_number="FR98765432101",
            address=Address(
                street="5 avenue de la Vision",
                city="Paris",
                postal_code="75011",
                country_code="FR",
            ),
        ),
        contact=Contact(name="Paulo Martins", email="compta@optipaulo.fr"),
        lines=[
            InvoiceLine(
                ean="4006381333931",
                description="Monture Aviator",
                quantity=Decimal("10"),
                unit_price=Decimal("85.00"),
                gross_price=Decimal("100.00"),
                discounts=[
                    Discount(
                        amount=Decimal("15.00"),
                        percent=Decimal("15"),
                        name="Remise fidélité",
                    ),
                ],
            ),
            InvoiceLine(
                description="Verres progressifs",
                quantity=Decimal("2"),
                unit_price=Decimal("35.00"),
            ),
        ],
    )
