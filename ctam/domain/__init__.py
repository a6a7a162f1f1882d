"""Scoring domain: entities, value objects and pure services."""
