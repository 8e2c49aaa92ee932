"""
Rule registry, validation engine and rule configuration.
"""

from .registry import RuleRegistry, TypeRuleSet
from .rule_config import RuleConfigLoader, RuleSetBuilder, parse_rule_config
from .rule_engine import ValidationEngine, ValidationResult

__all__ = [
    "RuleRegistry",
    "TypeRuleSet",
    "ValidationEngine",
    "ValidationResult",
    "RuleConfigLoader",
    "RuleSetBuilder",
    "parse_rule_config",
]
