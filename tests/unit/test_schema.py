from src.app.use_cases.content.commands import NewsCommand
from src.app.use_cases.schema import alias_keys


def test_alias_keys_maps_field_names_to_wire_names():
    patch = {"featured_image": "a.jpg", "title": "T", "excerpt": "E", "unknownKey": 1}

    assert alias_keys(NewsCommand, patch) == {
        "featuredImage": "a.jpg",
        "title": "T",
        "excerpt": "E",
        "unknownKey": 1,
    }


def test_alias_keys_keeps_wire_names():
    assert alias_keys(NewsCommand, {"featuredImage": "a.jpg"}) == {"featuredImage": "a.jpg"}
