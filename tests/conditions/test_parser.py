"""
Tests for the condition parser.
"""

import pytest

from stpp.conditions.lexer import LexError
from stpp.conditions.model import (
    BinaryCondition,
    ConditionType,
    GroupCondition,
    NotCondition,
    TagCondition,
)
from stpp.conditions.parser import ConditionParser, EmptyConditionError, ParseError


class TestConditionParser:

    def setup_method(self):
        self.parser = ConditionParser()

    def test_single_tag(self):
        result = self.parser.parse("linux")
        assert isinstance(result, TagCondition)
        assert result.name == "linux"

    def test_not(self):
        result = self.parser.parse("!linux")
        assert isinstance(result, NotCondition)
        assert isinstance(result.condition, TagCondition)

    def test_double_not(self):
        result = self.parser.parse("!!linux")
        assert isinstance(result, NotCondition)
        assert isinstance(result.condition, NotCondition)

    def test_group(self):
        result = self.parser.parse("(a || b)")
        assert isinstance(result, GroupCondition)
        assert result.condition.get_type() == ConditionType.OR

    def test_binary_operators(self):
        for text, op in [("a && b", ConditionType.AND), ("a || b", ConditionType.OR), ("a ^ b", ConditionType.XOR)]:
            result = self.parser.parse(text)
            assert isinstance(result, BinaryCondition)
            assert result.operator == op

    def test_mixed_operators_group_to_the_right(self):
        """a && b || c parses as a && (b || c): there is no precedence"""
        result = self.parser.parse("a && b || c")
        assert result.get_type() == ConditionType.AND
        assert isinstance(result.left, TagCondition)
        assert result.right.get_type() == ConditionType.OR
        assert str(result) == "a && b || c"

    def test_or_then_and_also_groups_to_the_right(self):
        result = self.parser.parse("a || b && c")
        assert result.get_type() == ConditionType.OR
        assert result.right.get_type() == ConditionType.AND

    def test_not_binds_only_the_next_operand(self):
        result = self.parser.parse("!a && b")
        assert result.get_type() == ConditionType.AND
        assert result.left.get_type() == ConditionType.NOT

    def test_parenthesized_right_operand(self):
        result = self.parser.parse("a && (b) ^ c")
        assert result.get_type() == ConditionType.AND
        assert result.right.get_type() == ConditionType.XOR
        assert isinstance(result.right.left, GroupCondition)

    def test_string_representation(self):
        assert str(self.parser.parse("!(a ^ b)")) == "!(a ^ b)"

    def test_empty_condition(self):
        with pytest.raises(EmptyConditionError) as exc_info:
            self.parser.parse("   ")
        assert exc_info.value.message == "Expected condition but got nothing"

    def test_empty_condition_is_a_parse_error(self):
        with pytest.raises(ParseError):
            self.parser.parse("")

    def test_missing_closing_parenthesis(self):
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse("(a")
        assert exc_info.value.message == "Expected ')' but got 'EOL'"

    def test_stray_closing_parenthesis(self):
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse("a)")
        assert "Unexpected token ')'" in str(exc_info.value)

    def test_trailing_tag(self):
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse("a b")
        assert exc_info.value.position == 2

    def test_dangling_operator(self):
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse("a &&")
        assert exc_info.value.message == "Expected 'Tag' but got 'EOL'"

    def test_lone_not(self):
        with pytest.raises(ParseError):
            self.parser.parse("!")

    def test_empty_group(self):
        with pytest.raises(ParseError):
            self.parser.parse("()")

    def test_strict_operators(self):
        parser = ConditionParser(strict_operators=True)
        with pytest.raises(LexError):
            parser.parse("a | b")
        # лояльный режим принимает ту же строку
        assert self.parser.parse("a | b").get_type() == ConditionType.OR
