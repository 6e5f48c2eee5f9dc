"""Rental property generator."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterator

from rent_ledger.generators.base import BaseGenerator
from rent_ledger.models import Property, PropertyInput
from rent_ledger.service import PortfolioService

logger = logging.getLogger(__name__)


class PropertyGenerator(BaseGenerator):
    """Generate synthetic rental units and tenants."""

    BUILDING_SUFFIXES = ["Towers", "Court", "Heights", "Apartments", "Gardens", "Residences"]
    BLOCKS = ["A", "B", "C", "D"]

    # Monthly rent in thousands
    RENT_RANGE = (8, 60)

    # Months of arrears and their weights
    ARREARS_MONTHS = [0, 1, 2, 3]
    ARREARS_WEIGHTS = [0.55, 0.25, 0.12, 0.08]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        num_buildings: int = 4,
    ) -> None:
        super().__init__(seed, locale)
        self.buildings = [
            f"{self.fake.last_name()} {self.random.choice(self.BUILDING_SUFFIXES)}"
            for _ in range(num_buildings)
        ]

    def generate(self) -> PropertyInput:
        """Generate a single property.

        Returns
        -------
        PropertyInput
            Property fields ready for ``PortfolioService.add_property``.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[PropertyInput]:
        """Generate multiple properties.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        PropertyInput
            Generated properties.
        """
        for _ in range(count):
            yield self._generate_one()

    def populate(
        self,
        service: PortfolioService,
        count: int,
        payment_rate: float = 0.5,
    ) -> list[Property]:
        """Add ``count`` properties through a service and settle some arrears.

        Parameters
        ----------
        service : PortfolioService
            Service the properties are added to.
        count : int
            Number of properties.
        payment_rate : float
            Chance that a property in arrears gets one payment recorded.

        Returns
        -------
        list[Property]
            Final state of the added properties.
        """
        added = []
        for data in self.generate_batch(count):
            prop = service.add_property(data)
            if prop.debt > 0 and self.random.random() < payment_rate:
                share = Decimal(self.random.choice([25, 50, 100])) / 100
                prop = service.record_payment(prop.id, (prop.debt * share).quantize(Decimal("1")))
            added.append(prop)
        logger.info("Generated %d properties", len(added))
        return added

    def _generate_one(self) -> PropertyInput:
        rent = Decimal(self.random.randint(*self.RENT_RANGE) * 1000)
        months = self.random.choices(self.ARREARS_MONTHS, weights=self.ARREARS_WEIGHTS, k=1)[0]
        debt = rent * months

        return PropertyInput(
            apartment_name=self.random.choice(self.buildings),
            house_number=f"{self.random.choice(self.BLOCKS)}{self.random.randint(1, 24)}",
            tenant_name=self.fake.name(),
            phone_number=self.fake.phone_number(),
            rent_amount=rent,
            debt=debt,
            is_paid=debt == 0,
        )
