"""Portfolio-wide views over the property collection."""

from rent_ledger.portfolio.aggregator import (
    PortfolioSummary,
    filter_properties,
    summarize,
)

__all__ = ["PortfolioSummary", "filter_properties", "summarize"]
