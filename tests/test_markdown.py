from blueprint.markdown import convert_ir_to_markdown


def test_blank_input_gives_empty_string():
    assert convert_ir_to_markdown("") == ""
    assert convert_ir_to_markdown("  \n\n  ") == ""


def test_persona_heading_with_blockquote_then_rule_heading():
    raw = "# Persona\nBe concise.\n\nRule One"
    assert convert_ir_to_markdown(raw) == "# Persona\n> Be concise.\n\n## Rule One"


def test_later_multiline_sections_become_bullets():
    raw = "Title\nLine A\nLine B\n\nSection Two\nItem 1\nItem 2"
    assert convert_ir_to_markdown(raw) == (
        "# Title\n> Line A\n> Line B\n\n## Section Two\n- Item 1\n- Item 2"
    )


def test_single_line_opening_is_heading_only():
    assert convert_ir_to_markdown("## Assistant") == "# Assistant"


def test_lines_are_trimmed_and_blank_lines_dropped():
    raw = "  Title  \n   \n  More text  \n\n  Rule  \n\tDetail "
    assert convert_ir_to_markdown(raw) == "# Title\n> More text\n\n## Rule\n- Detail"


def test_long_newline_runs_split_once():
    assert convert_ir_to_markdown("A\n\n\n\nB\n\n\nC") == "# A\n\n## B\n\n## C"


def test_windows_line_endings():
    assert convert_ir_to_markdown("A\r\nquote\r\n\r\nB") == "# A\n> quote\n\n## B"


def test_conversion_is_idempotent():
    raw = "Persona\nCalm.\n\nRules\nNo jargon.\nCite sources."
    assert convert_ir_to_markdown(raw) == convert_ir_to_markdown(raw)
