"""Test suite for the CTAM+ scoring library."""
