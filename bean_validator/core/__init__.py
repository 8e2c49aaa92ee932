"""
Core validation engine: rule-type catalog, validator table, rule registry and engine.
"""
