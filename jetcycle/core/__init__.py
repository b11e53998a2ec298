"""Core configuration for JetCycle.

This package contains:
- config: Immutable parameter sets, the validated builder, and JSON I/O
"""
