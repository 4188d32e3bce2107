"""
Unit tests for Field, IniSection and IniStore
"""
import pytest

from pyinireader.ini import ErrorCode, Field, IniSection, IniStore


class TestField:

    def test_str_is_key_equals_value(self):
        assert str(Field("port", "8080")) == "port=8080"

    def test_equality_needs_key_and_value(self):
        assert Field("a", "1") == Field("a", "1")
        assert Field("a", "1") != Field("a", "2")

    def test_ordered_by_key(self):
        fields = [Field("b", "1"), Field("a", "9"), Field("c", "0")]
        assert [i.key for i in sorted(fields)] == ["a", "b", "c"]

    def test_hashable(self):
        assert len({Field("a", "1"), Field("a", "1"), Field("a", "2")}) == 2


class TestIniSection:

    def test_read_only_mapping(self):
        section = IniSection("A")
        section._put("x", "1")
        assert section["x"] == "1"
        assert list(section) == ["x"]
        with pytest.raises(TypeError):
            section["y"] = "2"

    def test_fields_sorted(self):
        section = IniSection("A")
        section._put("zeta", "1")
        section._put("alpha", "2")
        assert section.fields() == [Field("alpha", "2"), Field("zeta", "1")]

    def test_str(self):
        assert str(IniSection("server")) == "[server]"


class TestIniStore:

    def test_open_section_is_find_or_create(self):
        store = IniStore()
        first = store._open_section("A")
        first._put("x", "1")
        again = store._open_section("A")
        assert again is first
        assert len(store) == 1
        assert store.section_names == {"A"}

    def test_section_names_is_a_copy(self):
        store = IniStore()
        store._open_section("A")
        store.section_names.add("B")
        assert store.section_names == {"A"}

    def test_lookup_missing(self):
        store = IniStore()
        store._open_section("A")._put("x", "1")
        assert store.lookup("A", "x") == "1"
        assert store.lookup("A", "y") is None
        assert store.lookup("B", "x") is None

    def test_unknown_section_raises(self):
        with pytest.raises(KeyError):
            IniStore()["nope"]

    def test_empty_sections(self):
        store = IniStore()
        store._open_section("A")._put("x", "1")
        store._open_section("B")
        assert store._empty_sections() == ["B"]


class TestErrorCode:

    def test_every_code_has_a_message(self):
        for code in ErrorCode:
            assert code.message

    def test_none_message(self):
        assert ErrorCode.NONE.message == "No error has occurred."
