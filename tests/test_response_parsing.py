from app.normalizers.parsing import (
    from_bracketed_array,
    from_fenced_block,
    from_whole_text,
    parse_model_output,
)


def test_fenced_block_wins_over_other_arrays():
    text = (
        "Here you go [not json]\n"
        "```json\n"
        '[{"name": "Jane"}, {"name": "Li Wei"}]\n'
        "```\n"
    )
    assert parse_model_output(text) == [{"name": "Jane"}, {"name": "Li Wei"}]


def test_fenced_block_label_is_case_insensitive():
    text = '```JSON\n[{"email": "a@b.co"}]\n```'
    assert from_fenced_block(text) == [{"email": "a@b.co"}]


def test_bare_array_in_prose():
    text = 'I found one card: [{"phone": "555-1111"}] Let me know if you need more.'
    assert parse_model_output(text) == [{"phone": "555-1111"}]


def test_whole_text_object():
    assert parse_model_output('{"name": "Jane"}') == {"name": "Jane"}


def test_broken_fence_falls_back_to_later_strategy():
    text = '```json\n[{"name": "Jane",]\n```\n{"name": "x"}'
    # fenced content and bracketed span are both invalid; whole text is not JSON either
    assert parse_model_output(text) is None

    text2 = '```json\n{oops}\n```\n[{"name": "Jane"}]'
    assert parse_model_output(text2) == [{"name": "Jane"}]


def test_individual_strategies_return_none_without_a_match():
    assert from_fenced_block("no fence") is None
    assert from_bracketed_array("no brackets") is None
    assert from_whole_text("not json") is None


def test_unparsable_or_empty_input_never_raises():
    for text in ["no json here", "", "   ", "[unclosed", "```json\n```", None]:
        assert parse_model_output(text) is None


def test_array_without_objects_falls_through_to_whole_text():
    text = '{"name": "Jane", "phone": ["555-1111", "555-2222"]}'
    assert from_bracketed_array(text) == ["555-1111", "555-2222"]
    assert parse_model_output(text) == {"name": "Jane", "phone": ["555-1111", "555-2222"]}


def test_output_with_only_an_empty_array_has_no_cards():
    assert parse_model_output("[]") is None
    assert parse_model_output('```json\n["a", "b"]\n```') is None
