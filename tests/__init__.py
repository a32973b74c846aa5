"""
Test Suite for Freight Finance

Test Structure:
- fixtures/: Shared line item builders
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and end-to-end workflow tests

Test Categories:
- Core utilities (currency, tax, validation, config)
- Invoice terms (presets, trigger status, invoiced totals)
- Costs and revenue (line items, profitability, filters)
- Profitability reporting and CLI

All booking, customer and vendor data in tests is synthetic.
"""
