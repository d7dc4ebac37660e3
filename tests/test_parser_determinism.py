from d20roll.parser import parse_text


def test_parse_is_deterministic():
    text = "(2d20 + 4) / 2 - (1d4 * 2)"
    a = parse_text(text)
    b = parse_text(text)

    assert a == b
    assert hash(a) == hash(b)
