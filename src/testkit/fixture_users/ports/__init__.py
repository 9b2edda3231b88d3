"""Ports (interfaces) for the fixture users context.

Ports define the contract of the identity store without specifying
implementation details, keeping the lifecycle logic independent of any
particular user backend.
"""

from fixture_users.ports.identity_store import Account, IIdentityStore, MutableAccount

__all__ = [
    "Account",
    "IIdentityStore",
    "MutableAccount",
]
