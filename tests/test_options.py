"""
Tests for ParserOptions construction and YAML loading
"""
import pytest

from pyinireader import ParserOptions


class TestParserOptions:

    def test_defaults(self):
        options = ParserOptions()
        assert options.allow_comments
        assert options.allow_inline_comments
        assert options.start_comment_prefixes == ";#"
        assert options.inline_comment_prefixes == ";"
        assert options.max_line_length is None

    def test_limited(self):
        options = ParserOptions.limited(max_key_length=10)
        assert options.max_section_length == 50
        assert options.max_key_length == 10
        assert options.max_line_length == 200

    def test_collecting_errors_rejected(self):
        with pytest.raises(ValueError):
            ParserOptions(stop_on_first_error=False)

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValueError):
            ParserOptions(max_line_length=0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ParserOptions().allow_comments = False

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "options.yaml"
        path.write_text(
            "allow_inline_comments: false\n"
            "start_comment_prefixes: '#'\n"
            "max_key_length: 32\n",
            encoding="utf-8")
        options = ParserOptions.from_yaml(path)
        assert options == ParserOptions(
            allow_inline_comments=False,
            start_comment_prefixes="#",
            max_key_length=32)

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "options.yaml"
        path.write_text("", encoding="utf-8")
        assert ParserOptions.from_yaml(path) == ParserOptions()

    def test_unknown_yaml_key(self, tmp_path):
        path = tmp_path / "options.yaml"
        path.write_text("allow_everything: true\n", encoding="utf-8")
        with pytest.raises(ValueError, match="allow_everything"):
            ParserOptions.from_yaml(path)

    def test_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "options.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            ParserOptions.from_yaml(path)
