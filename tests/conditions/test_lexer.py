"""
Tests for the condition lexer.
"""

import io

import pytest

from stpp.conditions.lexer import ConditionLexer, LexError, Token, TokenType
from stpp.source import CharSource


def _types(tokens):
    return [t.type for t in tokens]


class TestConditionLexer:

    def setup_method(self):
        self.lexer = ConditionLexer()

    def test_empty_string(self):
        """Test tokenization of empty string"""
        tokens = self.lexer.tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.EOL

    def test_whitespace_ignored(self):
        """Test whitespace is ignored"""
        tokens = self.lexer.tokenize("   \t  ")
        assert _types(tokens) == [TokenType.EOL]

    def test_single_char_operators(self):
        """Test recognition of !, ^ and parentheses"""
        tokens = self.lexer.tokenize("!^()")
        assert _types(tokens) == [
            TokenType.NOT, TokenType.XOR, TokenType.PAREN_OPEN, TokenType.PAREN_CLOSE, TokenType.EOL
        ]

    def test_doubled_operators(self):
        tokens = self.lexer.tokenize("a && b || c")
        assert _types(tokens) == [
            TokenType.TAG, TokenType.AND, TokenType.TAG, TokenType.OR, TokenType.TAG, TokenType.EOL
        ]
        assert self.lexer.warnings == []

    def test_tags_are_any_non_operator_run(self):
        """Tags may contain punctuation that is not an operator character"""
        tokens = self.lexer.tokenize("__linux__ x86-64 v1.2 Tag:Name")
        tags = [t.value for t in tokens if t.type is TokenType.TAG]
        assert tags == ["__linux__", "x86-64", "v1.2", "Tag:Name"]

    def test_operators_split_tags_without_spaces(self):
        tokens = self.lexer.tokenize("(a&&!b)^c")
        assert [t.describe() for t in tokens] == ["(", "a", "&&", "!", "b", ")", "^", "c", "EOL"]

    def test_positions(self):
        tokens = self.lexer.tokenize("ab && cd")
        assert [t.position for t in tokens] == [0, 3, 6, 8]

    def test_single_ampersand_is_lenient(self):
        """A single & is accepted as && with a warning"""
        tokens = self.lexer.tokenize("a & b")
        assert _types(tokens) == [TokenType.TAG, TokenType.AND, TokenType.TAG, TokenType.EOL]
        assert self.lexer.warnings == ["And operator is && not &"]

    def test_single_pipe_is_lenient(self):
        tokens = self.lexer.tokenize("a|b")
        assert _types(tokens) == [TokenType.TAG, TokenType.OR, TokenType.TAG, TokenType.EOL]
        assert [t.value for t in tokens if t.type is TokenType.TAG] == ["a", "b"]
        assert self.lexer.warnings == ["Or operator is || not |"]

    def test_single_operator_at_end_of_input(self):
        tokens = self.lexer.tokenize("a &")
        assert _types(tokens) == [TokenType.TAG, TokenType.AND, TokenType.EOL]
        assert len(self.lexer.warnings) == 1

    def test_warnings_reset_between_calls(self):
        self.lexer.tokenize("a & b")
        self.lexer.tokenize("a && b")
        assert self.lexer.warnings == []

    def test_strict_operators_rejects_single_char(self):
        lexer = ConditionLexer(strict_operators=True)
        with pytest.raises(LexError) as exc_info:
            lexer.tokenize("a & b")
        assert exc_info.value.position == 2

    def test_stops_at_end_of_line(self):
        """Only the current line is consumed from the stream"""
        source = CharSource(io.StringIO("a || b\nrest"))
        tokens = self.lexer.tokenize_line(source)
        assert [t.describe() for t in tokens] == ["a", "||", "b", "EOL"]
        assert source.read_line() == "rest"

    def test_pushback_keeps_newline_after_single_operator(self):
        source = CharSource(io.StringIO("a &\nnext"))
        tokens = self.lexer.tokenize_line(source)
        assert _types(tokens) == [TokenType.TAG, TokenType.AND, TokenType.EOL]
        assert source.read_line() == "next"

    def test_token_repr(self):
        token = Token(TokenType.TAG, "linux", 4)
        assert repr(token) == "Token(TAG, 'linux', pos=4)"
