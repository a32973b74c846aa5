"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest
import tempfile
from pathlib import Path
from typing import Dict, Any, List

from freight_finance.core import config as config_module
from freight_finance.costs import RevenueBillingStatus
from freight_finance.terms import InvoiceTerm, TriggerKind
from tests.fixtures.line_items import make_cost, make_revenue


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def dp_final_terms() -> List[InvoiceTerm]:
    """Down payment (30%, on JO creation) + final (70%, on delivery)."""
    return [
        InvoiceTerm("down_payment", 30, "Down Payment", TriggerKind.JO_CREATED),
        InvoiceTerm("final", 70, "Final Payment", TriggerKind.DELIVERY),
    ]


@pytest.fixture
def sample_booking_items() -> Dict[str, Any]:
    """Line items of one booking as stored rows (IDR and USD mixed)."""
    return {
        "costs": [
            make_cost("cost-1", 1_000_000).to_dict(),
            {
                "id": "cost-2",
                "booking_id": "BKG-2025-00001",
                "charge_type_id": "BL_FEE",
                "currency": "USD",
                "unit_price": 20,
                "quantity": 1,
                "amount": 20,
                "exchange_rate": 15_000,
                "amount_base": 300_000,
                "is_taxable": False,
                "tax_rate": 11,
                "tax_amount": 0,
                "total_amount": 300_000,
                "status": "paid",
                "paid_amount": 300_000,
            },
        ],
        "revenue": [
            make_revenue("rev-1", 2_000_000).to_dict(),
            make_revenue("rev-2", 600_000, status=RevenueBillingStatus.BILLED).to_dict(),
        ],
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and a fresh configuration."""
    monkeypatch.setenv('FREIGHT_FINANCE_ENV', 'test')
    for name in ('BASE_CURRENCY', 'DEFAULT_TAX_RATE', 'MARGIN_TARGET', 'PERCENTAGE_TOLERANCE', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)

    # Drop any configuration cached by a previous test
    monkeypatch.setattr(config_module, '_config', None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency conversion and tax"
    )
    config.addinivalue_line(
        "markers", "terms: Tests for invoice term splitting and status"
    )
    config.addinivalue_line(
        "markers", "profitability: Tests for cost/revenue profitability"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )
