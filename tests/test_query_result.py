import pytest

from gridkit.query_result import QueryNamedResult, QueryResult, RowsQueryResult

ROWS = [(1, "alpha", 0.5), (2, "beta", 1.5), (3, "gamma", 2.5)]


def test_counts():
    result = RowsQueryResult(ROWS)
    assert result.row_count == len(ROWS)
    assert result.field_count == len(ROWS[0])


def test_starts_on_first_row():
    result = RowsQueryResult(ROWS)
    assert result.fetch() == ROWS[0]
    assert result[1] == ROWS[0][1]


def test_iterates_all_rows_in_order():
    result = RowsQueryResult(ROWS)
    seen = [result.fetch()]
    while result.next_row():
        seen.append(result.fetch())
    assert seen == ROWS
    assert result.fetch() is None


def test_next_row_after_end_stays_false():
    result = RowsQueryResult(ROWS[:1])
    assert result.next_row() is False
    assert result.next_row() is False


def test_empty_result():
    result = RowsQueryResult([], field_count=4)
    assert result.row_count == 0
    assert result.field_count == 4
    assert result.fetch() is None
    with pytest.raises(IndexError):
        result[0]


def test_query_result_is_abstract():
    with pytest.raises(TypeError):
        QueryResult(0, 0)


def test_named_access():
    named = QueryNamedResult(RowsQueryResult(ROWS), ["id", "name", "weight"])
    assert named["name"] == ROWS[0][1]
    assert named[0] == ROWS[0][0]
    assert named.next_row() is True
    assert named["weight"] == ROWS[1][2]


def test_named_forwards_counts_and_fetch():
    named = QueryNamedResult(RowsQueryResult(ROWS), ["id", "name", "weight"])
    assert named.row_count == len(ROWS)
    assert named.field_count == len(ROWS[0])
    assert named.fetch() == ROWS[0]
    assert named.field_names == ["id", "name", "weight"]


def test_field_index():
    named = QueryNamedResult(RowsQueryResult(ROWS), ["id", "name", "weight"])
    assert named.field_index("weight") == 2
    assert named.field_index("id") == 0


def test_unknown_field_name_raises():
    named = QueryNamedResult(RowsQueryResult(ROWS), ["id", "name", "weight"])
    with pytest.raises(KeyError):
        named.field_index("missing")
    with pytest.raises(KeyError):
        named["missing"]