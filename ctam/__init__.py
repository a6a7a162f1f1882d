"""
CTAM+ scoring and aggregation library.

Turns hospital and health-office cybersecurity self-assessment records into
category evaluations, composite scores with quality levels, and
region/province drill-down aggregates.
"""

__version__ = "0.1.0"
