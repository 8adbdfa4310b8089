from blueprint.text_stats import estimate_tokens, extract_keywords


def test_higher_frequency_ranks_first():
    assert extract_keywords("alpha alpha alpha betas betas gamma", 2) == ["alpha", "betas"]


def test_short_words_are_ignored():
    # "beta" has four characters and never counts
    assert extract_keywords("alpha alpha alpha beta beta gamma", 2) == ["alpha", "gamma"]
    assert extract_keywords("the cat sat on a mat") == []


def test_ties_keep_first_occurrence_order():
    assert extract_keywords("zebra apple zebra apple mango") == ["zebra", "apple", "mango"]


def test_punctuation_and_case_are_normalized():
    assert extract_keywords("Retrieval-augmented, RETRIEVAL! (retrieval)") == [
        "retrieval",
        "augmented",
    ]


def test_default_limit_is_five():
    text = "first second third fourth fifth sixth seventh"
    assert extract_keywords(text) == ["first", "second", "third", "fourth", "fifth"]


def test_token_estimate_scales_word_count():
    assert estimate_tokens("one two three") == 4  # ceil(3.9)
    assert estimate_tokens(" ".join(["word"] * 10)) == 13
    assert estimate_tokens("a  b\n c") == 4


def test_token_estimate_of_blank_text_is_zero():
    assert estimate_tokens("") == 0
    assert estimate_tokens("   ") == 0
