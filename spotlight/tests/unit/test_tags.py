from apps.core.tags import TagList, normalize_tags


def test_add_trims_and_ignores_case_duplicates():
    tags = TagList()

    assert tags.add(" Seoul ") is True
    assert tags.add("seoul") is False
    assert tags.add("   ") is False
    assert tags.as_list() == ["Seoul"]


def test_remove_needs_exact_spelling():
    tags = TagList(["Seoul", "Drive"])

    assert tags.remove("seoul") is False
    assert tags.remove("Seoul") is True
    assert tags.as_list() == ["Drive"]


def test_from_text():
    tags = TagList.from_text("Reserve, drive-thru,, reserve ,Jeju")

    assert list(tags) == ["Reserve", "drive-thru", "Jeju"]
    assert len(tags) == 3
    assert "JEJU" in tags


def test_normalize_tags_keeps_first_spelling():
    assert normalize_tags(["DT", "dt", "Dt", "Roastery"]) == ["DT", "Roastery"]
    assert normalize_tags(None) == []
