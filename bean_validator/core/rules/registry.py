"""
Rule registry: field rules stored per class, without owning the class.

Rules are keyed by the type of the instance that defined them, so every
instance of a DTO class shares one rule set. Keys are held weakly: when a
class is garbage collected (for example a record type created on the fly
for one rule file), its entry disappears with it.
"""

import threading
import weakref
from collections.abc import Iterable

from bean_validator.core.models import RuleDescriptor, RuleLike

TypeRuleSet = dict[str, list[RuleDescriptor]]


class RuleRegistry:
    """Weak-key mapping from class to its field -> rule list associations."""

    def __init__(self):
        self._rules: "weakref.WeakKeyDictionary[type, TypeRuleSet]" = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def add_rule(self, type_key: type, field_name: str, rules: Iterable[RuleLike]) -> None:
        """
        Store the rule list for a field, replacing any previous list.

        Args:
            type_key: Class the rules belong to
            field_name: Field the rules apply to
            rules: Rule descriptors (or mappings) in evaluation order

        Raises:
            TypeError: If a rule is neither a RuleDescriptor nor a mapping
            pydantic.ValidationError: If a rule mapping is malformed
        """
        descriptors = [RuleDescriptor.coerce(rule) for rule in rules]

        with self._lock:
            rule_set = self._rules.get(type_key)
            if rule_set is None:
                rule_set = {}
                self._rules[type_key] = rule_set
            rule_set[field_name] = descriptors

    def rules_for(self, type_key: type) -> TypeRuleSet:
        """
        Return a snapshot of the rule set for a class.

        Returns an empty dict when the class never defined a field. The
        snapshot is safe to iterate while other threads define fields.
        """
        with self._lock:
            rule_set = self._rules.get(type_key)
            if rule_set is None:
                return {}
            return {field_name: list(rules) for field_name, rules in rule_set.items()}

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(types={len(self._rules)})"
