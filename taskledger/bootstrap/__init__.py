"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so callers can
obtain a ready ledger without importing infrastructure directly.
"""
