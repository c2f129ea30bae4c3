"""Lender screening for merchant funding requests."""
