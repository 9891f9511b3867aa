from src.feedback_extractor.csv_parser import parse_csv


def _render(table):
    lines = []
    for row in table:
        fields = []
        for value in row:
            if ',' in value or '"' in value:
                value = '"' + value.replace('"', '""') + '"'
            fields.append(value)
        lines.append(','.join(fields))
    return '\n'.join(lines)


def test_parse_simple_rows():
    assert parse_csv("id,feedback\n1,Great app") == [["id", "feedback"], ["1", "Great app"]]


def test_doubled_quote_is_escaped():
    assert parse_csv('a,"b""c",d') == [["a", 'b"c', "d"]]


def test_quoted_comma_stays_in_field():
    assert parse_csv('1,"Slow, but reliable",x') == [["1", "Slow, but reliable", "x"]]


def test_blank_lines_are_dropped():
    assert parse_csv("a,b\n\nc,d") == [["a", "b"], ["c", "d"]]
    assert parse_csv("a,b\n   \n\t\nc,d\n") == [["a", "b"], ["c", "d"]]


def test_crlf_line_endings():
    assert parse_csv("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]


def test_fields_are_trimmed():
    assert parse_csv("  a ,  b  ,c  ") == [["a", "b", "c"]]


def test_rows_keep_their_own_length():
    assert parse_csv("a,b,c\n1\n1,2,3,4") == [["a", "b", "c"], ["1"], ["1", "2", "3", "4"]]


def test_empty_fields_are_kept():
    assert parse_csv("a,,b,") == [["a", "", "b", ""]]


def test_unterminated_quote_runs_to_end_of_line():
    assert parse_csv('a,"b,c\nd,e') == [["a", "b,c"], ["d", "e"]]


def test_quoted_newline_splits_the_row():
    assert parse_csv('a,"first\nsecond"') == [["a", "first"], ["second"]]


def test_empty_input_yields_empty_table():
    assert parse_csv("") == []
    assert parse_csv("\n\r\n  \n") == []


def test_rendered_tables_parse_back():
    tables = [
        [["id", "feedback", "date"], ["1", "Great, fast service", "2024-01-01"]],
        [["quote"], ['She said "wow"'], ['"leading quote']],
        [["a", "b"], ["", "x"], ["y", ""]],
        [["comment"], ['commas, "quotes", and more, "here"']],
    ]
    for table in tables:
        assert parse_csv(_render(table)) == table


def test_byte_order_mark_is_trimmed():
    assert parse_csv("\ufeffFeedback,id\n\ufeff\nok,1") == [["Feedback", "id"], ["ok", "1"]]
    assert parse_csv('\ufeff"Customer Feedback",Date') == [["Customer Feedback", "Date"]]
