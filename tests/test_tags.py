import enum

from inkrt.tags import TagList


class Mood(enum.Enum):
    MOOD_HAPPY = 1
    MOOD_SAD = 2
    MOOD_ANGRY = 3


def test_has_present_and_absent():
    tags = TagList(["alpha", "beta"])
    assert tags.has("alpha") is True
    assert tags.has("gamma") is False


def test_has_requires_exact_match():
    tags = TagList(["alpha"])
    assert tags.has("alp") is False
    assert tags.has("ALPHA") is False


def test_empty_list():
    tags = TagList()
    assert len(tags) == 0
    assert tags.has("x") is False
    assert tags.get_value("x") == ""
    assert tags.has_enum(Mood) is None


def test_get_value_trims_whitespace():
    tags = TagList(["speaker:   Bob  ", "other"])
    assert tags.get_value("speaker") == "Bob"


def test_get_value_first_match_wins():
    tags = TagList(["k:first", "k:second"])
    assert tags.get_value("k") == "first"


def test_get_value_needs_colon_after_name():
    tags = TagList(["speakerBob", "speak:x"])
    assert tags.get_value("speaker") == ""


def test_has_enum_suffix_match():
    tags = TagList(["unrelated", "SAD"])
    assert tags.has_enum(Mood) is Mood.MOOD_SAD


def test_has_enum_tag_order_priority():
    tags = TagList(["ANGRY", "HAPPY"])
    assert tags.has_enum(Mood) is Mood.MOOD_ANGRY


def test_has_enum_no_match():
    tags = TagList(["calm", "bored"])
    assert tags.has_enum(Mood) is None


def test_iteration_preserves_order():
    items = ["c", "a", "b"]
    assert list(TagList(items)) == items
    assert "a" in TagList(items)