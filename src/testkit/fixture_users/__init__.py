"""Fixture users bounded context.

Declares the synthetic user accounts a test suite runs with, creates them
in the application's identity store before the suite, deletes them after
it, and lets test steps look them up by name or role.
"""
