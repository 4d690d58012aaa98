from storefront_relay.api.deps import nest_form


def test_nest_form_keeps_flat_keys() -> None:
    assert nest_form([("body", "hi"), ("product_id", "1")]) == {"body": "hi", "product_id": "1"}


def test_nest_form_builds_objects_from_brackets() -> None:
    items = [("review[rating]", "4"), ("review[characteristics][fit]", "3"), ("review[characteristics][size]", "2")]

    assert nest_form(items) == {"review": {"rating": "4", "characteristics": {"fit": "3", "size": "2"}}}


def test_nest_form_collects_lists() -> None:
    items = [("photos[]", "a.png"), ("photos[]", "b.png"), ("tag", "x"), ("tag", "y")]

    assert nest_form(items) == {"photos": ["a.png", "b.png"], "tag": ["x", "y"]}


def test_nest_form_single_append_is_still_a_list() -> None:
    assert nest_form([("review[photos][]", "a.png")]) == {"review": {"photos": ["a.png"]}}
