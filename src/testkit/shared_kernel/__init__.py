"""Shared kernel: cross-cutting primitives used by every bounded context."""
