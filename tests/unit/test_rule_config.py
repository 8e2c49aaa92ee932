"""
Unit tests for rule configuration loading and building.
"""

import pytest

from bean_validator.core.models import RuleDescriptor
from bean_validator.core.rules import RuleConfigLoader, RuleSetBuilder, parse_rule_config


class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    def test_load_rules_from_yaml(self, user_rules_path):
        rule_set = RuleConfigLoader(user_rules_path).load_rules()

        assert list(rule_set) == ["name", "email", "age", "tags"]
        assert [rule.type for rule in rule_set["email"]] == ["notEmpty", "email"]
        assert rule_set["age"][1] == RuleDescriptor(
            type="min", message="Must be at least 18", params={"min": 18}
        )

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader(tmp_path / "missing.yaml")

    def test_missing_rules_section(self, tmp_path):
        config_file = tmp_path / "rules.yaml"
        config_file.write_text("fields: {}\n")

        with pytest.raises(ValueError, match="rules"):
            RuleConfigLoader(config_file).load_rules()

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "rules.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError):
            RuleConfigLoader(config_file).load_rules()

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "rules.yaml"
        config_file.write_text("rules: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            RuleConfigLoader(config_file).load_rules()

    def test_unknown_rule_types_are_not_checked_at_load_time(self, test_data_dir):
        rule_set = RuleConfigLoader(f"{test_data_dir}/unknown_rule_type.yaml").load_rules()
        assert rule_set["name"][0].type == "doesNotExist"


class TestParseRuleConfig:
    """Tests for parse_rule_config"""

    def test_parameters_alias(self):
        rule_set = parse_rule_config({
            "rules": {"age": [{"type": "max", "message": "too old", "parameters": {"max": 99}}]}
        })
        assert rule_set["age"][0].params == {"max": 99}

    def test_field_rules_must_be_list(self):
        with pytest.raises(ValueError, match="must be a list"):
            parse_rule_config({"rules": {"name": {"type": "notNull"}}})

    def test_rule_requires_type(self):
        with pytest.raises(ValueError, match="missing 'type'"):
            parse_rule_config({"rules": {"name": [{"message": "required"}]}})

    def test_rule_requires_message(self):
        with pytest.raises(ValueError, match="missing 'message'"):
            parse_rule_config({"rules": {"name": [{"type": "notNull"}]}})

    def test_rule_must_be_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            parse_rule_config({"rules": {"name": ["notNull"]}})

    def test_empty_type_rejected(self):
        with pytest.raises(ValueError, match="Invalid rule"):
            parse_rule_config({"rules": {"name": [{"type": "", "message": "required"}]}})

    def test_reserved_field_name_rejected(self):
        with pytest.raises(ValueError, match="reserved"):
            parse_rule_config({"rules": {"__class__": [{"type": "notNull", "message": "required"}]}})


class TestRuleSetBuilder:
    """Tests for RuleSetBuilder"""

    def test_build_rule_set(self):
        rule_set = RuleSetBuilder() \
            .not_empty("name", "Name is required") \
            .email("email", "Invalid email") \
            .min_value("age", 18, "Too young") \
            .max_value("age", 120, "Too old") \
            .build()

        assert list(rule_set) == ["name", "email", "age"]
        assert [rule.params for rule in rule_set["age"]] == [{"min": 18}, {"max": 120}]
        assert rule_set["name"][0].params is None

    def test_range_and_size_omit_missing_bounds(self):
        rule_set = RuleSetBuilder() \
            .range("score", "out of range", min_value=0) \
            .size("tags", "too many tags", max_size=5) \
            .build()

        assert rule_set["score"][0].params == {"min": 0}
        assert rule_set["tags"][0].params == {"max": 5}

    def test_generic_add(self):
        rule_set = RuleSetBuilder() \
            .add("code", "startsWithA", "must start with A") \
            .pattern("code", r"^[A-Z]", "must be upper case") \
            .not_null("code", "required") \
            .not_blank("code", "blank") \
            .build()

        assert [rule.type for rule in rule_set["code"]] == ["startsWithA", "pattern", "notNull", "notBlank"]

    def test_build_returns_copy(self):
        builder = RuleSetBuilder().not_null("name", "required")
        rule_set = builder.build()
        rule_set["name"].clear()

        assert len(builder.build()["name"]) == 1
