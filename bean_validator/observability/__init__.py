"""
Structured logging and Prometheus metrics for bean-validator.
"""
