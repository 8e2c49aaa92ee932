"""
Rule configuration management.

Loads field rule sets from YAML files and provides a builder for
assembling them in code. A loaded rule set can be passed straight to
define_fields().
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bean_validator.core.models import RuleDescriptor
from bean_validator.core.validators import rule_types

from .registry import TypeRuleSet


def parse_rule_config(config: Mapping[str, Any] | None) -> TypeRuleSet:
    """
    Parse an in-memory rule configuration.

    Args:
        config: Mapping with a "rules" section of field -> list of rules

    Returns:
        Field name -> rule descriptors, in document order

    Raises:
        ValueError: If the configuration is malformed
    """
    if not config or "rules" not in config:
        raise ValueError("Configuration must contain 'rules' section")

    field_rules = config["rules"]
    if not isinstance(field_rules, Mapping):
        raise ValueError("'rules' section must map field names to rule lists")

    rule_set: TypeRuleSet = {}
    for field_name, field_rule_list in field_rules.items():
        if str(field_name).startswith("__") and str(field_name).endswith("__"):
            raise ValueError(f"Field name '{field_name}' is reserved")
        if not isinstance(field_rule_list, list):
            raise ValueError(f"Rules for field '{field_name}' must be a list")

        rule_set[str(field_name)] = [
            _parse_rule(str(field_name), rule_def, idx)
            for idx, rule_def in enumerate(field_rule_list)
        ]

    return rule_set


def _parse_rule(field_name: str, rule_def: Any, idx: int) -> RuleDescriptor:
    """
    Parse a single rule definition.

    Raises:
        ValueError: If the rule definition is invalid
    """
    if not isinstance(rule_def, Mapping):
        raise ValueError(f"Rule {idx} for field '{field_name}' must be a mapping")
    if "type" not in rule_def:
        raise ValueError(f"Rule {idx} for field '{field_name}' is missing 'type'")
    if "message" not in rule_def:
        raise ValueError(f"Rule {idx} for field '{field_name}' is missing 'message'")

    params = rule_def.get("params", rule_def.get("parameters"))

    try:
        return RuleDescriptor(
            type=rule_def["type"],
            message=rule_def["message"],
            params=params,
        )
    except ValidationError as e:
        raise ValueError(f"Invalid rule {idx} for field '{field_name}': {e}") from e


class RuleConfigLoader:
    """
    Loads field rule sets from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      email:
        - type: notEmpty
          message: Email is required
        - type: email
          message: Invalid email

      age:
        - type: min
          message: Must be at least 18
          params:
            min: 18
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> TypeRuleSet:
        """
        Load and parse the rule set from the YAML file.

        Raises:
            ValueError: If the YAML is invalid or missing required fields
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if config is not None and not isinstance(config, Mapping):
            raise ValueError("Configuration file must contain a mapping")

        return parse_rule_config(config)


class RuleSetBuilder:
    """
    Programmatically build a rule set (for DTOs or tests).

        rules = RuleSetBuilder() \\
            .not_empty("name", "Name is required") \\
            .email("email", "Invalid email") \\
            .min_value("age", 18, "Too young") \\
            .build()
    """

    def __init__(self):
        self.rules: TypeRuleSet = {}

    def add(self, field_name: str, rule_type: str, message: str, **params: Any) -> "RuleSetBuilder":
        """Append a rule of any type to a field."""
        self.rules.setdefault(field_name, []).append(
            RuleDescriptor(type=rule_type, message=message, params=params or None)
        )
        return self

    def not_null(self, field_name: str, message: str) -> "RuleSetBuilder":
        return self.add(field_name, rule_types.NOT_NULL, message)

    def not_empty(self, field_name: str, message: str) -> "RuleSetBuilder":
        return self.add(field_name, rule_types.NOT_EMPTY, message)

    def not_blank(self, field_name: str, message: str) -> "RuleSetBuilder":
        return self.add(field_name, rule_types.NOT_BLANK, message)

    def email(self, field_name: str, message: str) -> "RuleSetBuilder":
        return self.add(field_name, rule_types.EMAIL, message)

    def pattern(self, field_name: str, regex: str, message: str) -> "RuleSetBuilder":
        return self.add(field_name, rule_types.PATTERN, message, regex=regex)

    def min_value(self, field_name: str, minimum: float, message: str) -> "RuleSetBuilder":
        return self.add(field_name, rule_types.MIN, message, min=minimum)

    def max_value(self, field_name: str, maximum: float, message: str) -> "RuleSetBuilder":
        return self.add(field_name, rule_types.MAX, message, max=maximum)

    def range(
        self,
        field_name: str,
        message: str,
        min_value: float | None = None,
        max_value: float | None = None,
    ) -> "RuleSetBuilder":
        """Add a range rule; omitted bounds are open."""
        params = {}
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value
        return self.add(field_name, rule_types.RANGE, message, **params)

    def size(
        self,
        field_name: str,
        message: str,
        min_size: int | None = None,
        max_size: int | None = None,
    ) -> "RuleSetBuilder":
        """Add a size rule; omitted bounds default to 0 and unbounded."""
        params = {}
        if min_size is not None:
            params["min"] = min_size
        if max_size is not None:
            params["max"] = max_size
        return self.add(field_name, rule_types.SIZE, message, **params)

    def build(self) -> TypeRuleSet:
        """Build and return the rule set."""
        return {field_name: list(rules) for field_name, rules in self.rules.items()}
