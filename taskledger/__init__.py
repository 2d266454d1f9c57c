"""
Task Ledger - ledger-resident task and reward tracker.

Participants create tasks, assign them, complete them and accrue points
that deterministically derive a level between 1 and 5.

Ledger Truths:
- Every successful mutation leaves exactly one audit record
- A failed operation changes nothing and records nothing
- Privilege is possession of the admin credential, never a flag
- Level is a pure function of points earned
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
