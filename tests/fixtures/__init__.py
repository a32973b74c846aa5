"""
Test Fixtures and Utilities

Shared builders for synthetic term sets and cost/revenue line items.
All test data is synthetic.
"""
