import pytest

from sql_split import count, has_multiple, split_all, split_bounded


class TestSplitAll:
    def test_single_statement_without_terminator(self):
        assert split_all("CREATE TABLE foo (bar text)") == ["CREATE TABLE foo (bar text)"]

    def test_single_statement_with_terminator(self):
        assert split_all("CREATE TABLE foo (bar text);") == ["CREATE TABLE foo (bar text);"]

    def test_two_statements(self):
        result = split_all("CREATE TABLE foo (bar text); INSERT INTO foo (bar) VALUES ('hi')")
        assert result == ["CREATE TABLE foo (bar text);", "INSERT INTO foo (bar) VALUES ('hi')"]

    def test_invalid_sql_is_not_validated(self):
        result = split_all("invalid sql; but we don't care because we don't really parse it;")
        assert result == ["invalid sql;", "but we don't care because we don't really parse it;"]

    def test_empty_string(self):
        assert split_all("") == []

    def test_whitespace_only(self):
        assert split_all("  \n\t  ") == []

    def test_consecutive_terminators_skipped(self):
        assert split_all("a;;;b;") == ["a;", "b;"]

    def test_lone_terminator(self):
        assert split_all(";") == []

    def test_whitespace_between_terminators_skipped(self):
        assert split_all("SELECT 1; ;\n; SELECT 2;") == ["SELECT 1;", "SELECT 2;"]

    def test_statements_are_trimmed(self):
        assert split_all("\n  SELECT 1 ;\n\n  SELECT 2  \n") == ["SELECT 1 ;", "SELECT 2"]

    def test_interior_whitespace_preserved(self):
        assert split_all("SELECT\n  a,\n  b\nFROM t;") == ["SELECT\n  a,\n  b\nFROM t;"]

    def test_multibyte_characters(self):
        result = split_all("SELECT '日本語'; SELECT 1")
        assert result == ["SELECT '日本語';", "SELECT 1"]

    def test_trailing_line_comment(self):
        assert split_all("SELECT * FROM foo; -- trailing comments are fine") == ["SELECT * FROM foo;"]

    def test_trailing_block_comment(self):
        assert split_all("SELECT * FROM foo; /* trailing comments are fine */") == ["SELECT * FROM foo;"]

    def test_meta_command_then_sql(self):
        assert split_all(".dump\nDROP TABLE t") == [".dump", "DROP TABLE t"]


class TestSplitBounded:
    SQL = "SELECT 1; SELECT 2; SELECT 3;"

    def test_limit_none_is_unbounded(self):
        assert split_bounded(self.SQL) == split_all(self.SQL)
        assert split_bounded(self.SQL, None) == ["SELECT 1;", "SELECT 2;", "SELECT 3;"]

    def test_limit_smaller_than_count(self):
        assert split_bounded(self.SQL, 2) == ["SELECT 1;", "SELECT 2;"]

    def test_limit_equal_to_count(self):
        assert split_bounded(self.SQL, 3) == split_all(self.SQL)

    def test_limit_larger_than_count(self):
        assert split_bounded(self.SQL, 10) == split_all(self.SQL)

    def test_limit_one(self):
        assert split_bounded(self.SQL, 1) == ["SELECT 1;"]

    def test_limit_zero(self):
        assert split_bounded(self.SQL, 0) == []

    def test_limit_counts_trailing_unterminated_statement(self):
        assert split_bounded("SELECT 1; SELECT 2", 2) == ["SELECT 1;", "SELECT 2"]

    def test_empty_input(self):
        assert split_bounded("", 5) == []

    @pytest.mark.parametrize("limit", [0, 1, 2, 3, 4, None])
    def test_result_is_prefix_of_split_all(self, limit):
        full = split_all(self.SQL)
        result = split_bounded(self.SQL, limit)
        assert result == full[: len(result)]
        expected_len = len(full) if limit is None else min(limit, len(full))
        assert len(result) == expected_len


class TestCount:
    @pytest.mark.parametrize(
        ("sql", "expected"),
        [
            ("", 0),
            ("CREATE TABLE foo (bar text)", 1),
            ("CREATE TABLE foo (bar text);", 1),
            ("CREATE TABLE foo (bar text); INSERT into foo (bar) VALUES ('hi')", 2),
            ("invalid sql; but we don't care because we don't really parse it;", 2),
            ("INSERT INTO foo (bar) VALUES ('semicolon in string: ;')", 1),
            ('INSERT INTO foo (bar) VALUES ("semicolon in double-quoted string: ;")', 1),
            ("INSERT INTO foo (bar) VALUES (`semicolon in backtick string: ;`)", 1),
            ("INSERT INTO foo (bar) VALUES ('interior quote and semicolon in string: ;''')", 1),
            ('INSERT INTO foo (bar) VALUES ("interior quote and semicolon in double-quoted string: ;""")', 1),
            ("INSERT INTO foo (bar) VALUES (`interior quote and semicolon in backtick string: ;```)", 1),
            ("INSERT INTO foo (bar) VALUES (`semicolon after interior quote ``;`)", 1),
            ("CREATE TABLE [foo;bar] (bar text); INSERT into foo (bar) VALUES ('hi')", 2),
            ("SELECT * FROM foo; -- trailing comments are fine", 1),
            ("SELECT * FROM foo; /* trailing comments are fine */", 1),
        ],
    )
    def test_count(self, sql, expected):
        assert count(sql) == expected
        assert count(sql) == len(split_all(sql))


class TestHasMultiple:
    def test_empty(self):
        assert has_multiple("") is False

    def test_single_statement(self):
        assert has_multiple("SELECT 1;") is False

    def test_single_statement_with_trailing_comment(self):
        assert has_multiple("SELECT 1; -- and nothing else") is False

    def test_two_statements(self):
        assert has_multiple("SELECT 1; SELECT 2") is True

    def test_quoted_terminator_is_not_a_second_statement(self):
        assert has_multiple("INSERT INTO t VALUES (';')") is False

    def test_many_statements(self):
        assert has_multiple("SELECT 1; SELECT 2; SELECT 3;") is True
