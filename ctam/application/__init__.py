"""
Application layer.

Adapts store records to domain entities, wires settings into the scoring
services and builds the drill-down reports.
"""
