"""
Command-line interface for bean-validator.
"""
