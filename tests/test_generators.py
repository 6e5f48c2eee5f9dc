"""Tests for sample data generators."""

from decimal import Decimal

from rent_ledger.generators import PropertyGenerator
from rent_ledger.ledger import engine
from rent_ledger.service import PortfolioService


class TestPropertyGenerator:
    """Tests for PropertyGenerator."""

    def test_generate_property(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)
        data = gen.generate()

        assert data.apartment_name in gen.buildings
        assert data.house_number[0] in PropertyGenerator.BLOCKS
        assert data.tenant_name
        assert data.phone_number
        assert Decimal("8000") <= data.rent_amount <= Decimal("60000")
        assert data.debt % data.rent_amount == 0
        assert data.is_paid == (data.debt == 0)

    def test_generated_input_is_valid(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for data in gen.generate_batch(20):
            engine.create(data)

    def test_generate_batch(self, seed: int) -> None:
        assert len(list(PropertyGenerator(seed=seed).generate_batch(5))) == 5

    def test_seed_is_reproducible(self, seed: int) -> None:
        first = list(PropertyGenerator(seed=seed).generate_batch(5))
        second = list(PropertyGenerator(seed=seed).generate_batch(5))

        assert first == second

    def test_populate(self, seed: int, service: PortfolioService) -> None:
        added = PropertyGenerator(seed=seed).populate(service, 10, payment_rate=1.0)

        assert len(added) == 10
        assert service.properties == tuple(added)
        for prop in added:
            if prop.payment_history:
                assert len(prop.payment_history) == 1
                assert prop.payment_history[0].amount > 0

    def test_populate_without_payments(self, seed: int, service: PortfolioService) -> None:
        added = PropertyGenerator(seed=seed).populate(service, 10, payment_rate=0.0)

        assert all(prop.payment_history == () for prop in added)
