"""Query Builder — verifies list/count statement composition.

Tests:
    - Empty fragments omit WHERE / ORDER BY entirely
    - LIMIT appears only for limit != 0, with its OFFSET
    - Count never paginates but keeps filter and order
    - sanitize() collapses doubled quotes and strips terminators
    - and_filters() parenthesizes only when combining fragments
"""

from dal.core.query_builder import QueryBuilder, and_filters, sanitize


def _builder():
    return QueryBuilder("idcity, code, name", "v_city")


def test_select_without_fragments_is_bare():
    assert _builder().select_for_list() == "SELECT idcity, code, name FROM v_city"


def test_select_with_filter_and_order():
    sql = _builder().select_for_list("code = 'BOG'", "name DESC")
    assert sql == (
        "SELECT idcity, code, name FROM v_city WHERE code = 'BOG' ORDER BY name DESC"
    )


def test_select_with_limit_emits_offset():
    sql = _builder().select_for_list("", "name", limit=10, offset=20)
    assert sql.endswith(" ORDER BY name LIMIT 10 OFFSET 20")


def test_zero_limit_means_no_pagination():
    sql = _builder().select_for_list("", "", limit=0, offset=50)
    assert "LIMIT" not in sql
    assert "OFFSET" not in sql


def test_count_keeps_filter_and_order_but_never_paginates():
    sql = _builder().count_for_list("code = 'BOG'", "name")
    assert sql == (
        "SELECT COUNT(1) AS total FROM v_city WHERE code = 'BOG' ORDER BY name"
    )


def test_count_without_fragments():
    assert _builder().count_for_list() == "SELECT COUNT(1) AS total FROM v_city"


def test_terminators_are_stripped_from_every_fragment():
    builder = QueryBuilder("idcity;", "v_city;")
    sql = builder.select_for_list("code = 'X'; DROP TABLE city", "name;")
    assert ";" not in sql
    assert builder.fields == "idcity"
    assert builder.source == "v_city"


def test_sanitize_collapses_doubled_quotes():
    assert sanitize("name = ''O''Brien''") == "name = 'O'Brien'"


def test_sanitize_empty_input():
    assert sanitize("") == ""
    assert sanitize(None) == ""


def test_and_filters_single_fragment_unchanged():
    assert and_filters("idowner = 1", "") == "idowner = 1"
    assert and_filters(None, "") == ""


def test_and_filters_parenthesizes_each_fragment():
    assert and_filters("idowner = 1", "name = 'a' OR name = 'b'") == (
        "(idowner = 1) AND (name = 'a' OR name = 'b')"
    )
