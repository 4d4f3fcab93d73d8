"""Adapters translating external formats into the domain model."""
