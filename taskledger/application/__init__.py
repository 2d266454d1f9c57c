"""Application layer: ports and the orchestrating ledger service."""
