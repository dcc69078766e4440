from app.services.projector import compact_item, detailed_item, numeric_or_text, row_id


def test_compact_aliases():
    item = compact_item({"ID": "Q1", "name": "Quartz", "url": "http://img/q.png"})
    assert item.model_dump() == {
        "id": "Q1",
        "title": "Quartz",
        "difficulty": "",
        "image_url": "http://img/q.png",
    }


def test_alias_priority():
    row = {"id": "", "ID": "upper", "Id": "mixed", "gif_url": "g.gif", "image_url": "i.png"}
    assert row_id(row) == "upper"
    assert compact_item(row).image_url == "g.gif"
    assert row_id({"Id": "mixed"}) == "mixed"
    assert row_id({}) == ""


def test_difficulty_numeric_conversion():
    assert numeric_or_text("3") == 3
    assert numeric_or_text(" 2.5 ") == 2.5
    assert numeric_or_text("hard") == "hard"
    assert numeric_or_text("nan") == "nan"
    assert numeric_or_text("") == ""
    assert compact_item({"difficulty": 4}).difficulty == 4


def test_detailed_item_full():
    row = {
        "id": "m7",
        "title": "Mirror",
        "description": "A reflective one",
        "image_url": "http://img/m7.gif",
        "solution": "Look twice",
        "difficulty": "3",
        "tags": " optics, , light,optics ,",
    }
    item = detailed_item(row)
    assert item.text == "Found: Mirror (Difficulty: 3)"
    assert item.caption == "A reflective one"
    assert item.image_markdown == "![Mirror](http://img/m7.gif)"
    assert item.difficulty == "3"
    assert item.tags == ["optics", "light", "optics"]
    assert list(item.model_dump()) == [
        "text", "id", "title", "caption", "image_url",
        "image_markdown", "solution", "difficulty", "tags",
    ]


def test_detailed_item_fallbacks():
    item = detailed_item({"id": "k2"})
    assert item.text == "Found: k2 (Difficulty: N/A)"
    assert item.image_markdown == ""
    assert item.tags == []
    assert item.difficulty == ""

    no_label = detailed_item({"url": "http://img/x.png"})
    assert no_label.image_markdown == "![image](http://img/x.png)"


def test_scalar_rows_project_to_empty_fields():
    assert row_id("abc") == ""
    assert compact_item(7).model_dump() == {"id": "", "title": "", "difficulty": "", "image_url": ""}
    assert detailed_item(None).text == "Found:  (Difficulty: N/A)"
