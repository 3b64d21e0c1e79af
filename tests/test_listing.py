import pytest
from bs4 import BeautifulSoup
from markupsafe import Markup

from htmlgen.listing import Leaf, Nested, dl, list_entries, listing, ol, ul


def test_empty_list_short_circuits():
    assert ul([]) == ""
    assert ol({}) == ""
    assert ul([], {"class": "menu"}) == ""


def test_flat_list():
    assert ul(["a", "b"]) == "<ul><li>a</li><li>b</li></ul>"
    assert ol(["a"]) == "<ol><li>a</li></ol>"


def test_nested_unlabeled_list_is_spliced_without_li():
    assert ul([["x", "y"]]) == "<ul><ul><li>x</li><li>y</li></ul></ul>"


def test_nested_labeled_list_shares_one_li():
    assert ul({"Fruits": ["apple", "pear"]}) == (
        "<ul><li>Fruits<ul><li>apple</li><li>pear</li></ul></li></ul>"
    )


def test_deep_mixed_nesting():
    rendered = ul(["a", ["b", ["c"]], {"Sub": ["d"]}])
    assert rendered == (
        "<ul><li>a</li>"
        "<ul><li>b</li><ul><li>c</li></ul></ul>"
        "<ul><li>Sub<ul><li>d</li></ul></li></ul>"
        "</ul>"
    )


def test_attributes_only_apply_to_outer_list():
    assert ol([["x"]], {"class": "steps", 0: "reversed"}) == (
        '<ol class="steps" reversed><ol><li>x</li></ol></ol>'
    )


def test_empty_nested_collections():
    assert ul(["a", []]) == "<ul><li>a</li></ul>"
    assert ul({"Empty": []}) == "<ul><li>Empty</li></ul>"


def test_leaf_values_are_escaped():
    assert ul(["<b>&"]) == "<ul><li>&lt;b&gt;&amp;</li></ul>"
    assert ul([Markup("<b>ok</b>")]) == "<ul><li><b>ok</b></li></ul>"


def test_scalar_leaves_are_stringified():
    assert ul([1, 2.5, True, None]) == "<ul><li>1</li><li>2.5</li><li>1</li><li></li></ul>"


def test_integer_like_keys_count_as_positions():
    assert ul({0: ["x"]}) == "<ul><ul><li>x</li></ul></ul>"
    assert ul({"1": ["x"]}) == "<ul><ul><li>x</li></ul></ul>"
    assert ul({"1.5": ["x"]}) == "<ul><li>1.5<ul><li>x</li></ul></li></ul>"


def test_tuples_are_nested_collections():
    assert ul([("x",)]) == "<ul><ul><li>x</li></ul></ul>"


def test_list_entries_are_tagged():
    entries = list(list_entries({"Label": ["a"], "k": "v"}))
    assert entries == [Nested("Label", ["a"]), Leaf("k", "v")]
    assert not entries[0].positional
    assert list(list_entries([["a"]]))[0].positional


def test_listing_returns_markup():
    assert isinstance(listing("ul", ["a"]), Markup)


def test_menu_structure_parses():
    menu = {"Products": ["Shoes", "Hats"], "About": ["Team", {"Jobs": ["Remote"]}]}
    soup = BeautifulSoup(str(ul(menu, {"id": "menu"})), "html.parser")

    root = soup.find("ul", id="menu")
    top_items = root.find_all("li", recursive=False)
    assert [item.contents[0] for item in top_items] == ["Products", "About"]
    assert [li.text for li in top_items[0].ul.find_all("li")] == ["Shoes", "Hats"]
    jobs = top_items[1].ul.find_all("ul", recursive=False)[0]
    assert jobs.li.contents[0] == "Jobs"


def test_description_list():
    rendered = dl({"Fruits": ["apple", "pear"], "Veg": "kale", "Nothing": None})
    assert rendered == (
        "<dl><dt>Fruits</dt><dd>apple</dd><dd>pear</dd>"
        "<dt>Veg</dt><dd>kale</dd><dt>Nothing</dt></dl>"
    )


@pytest.mark.parametrize(
    ("attrs", "expected"),
    [({}, "<dl></dl>"), ({"class": "terms"}, '<dl class="terms"></dl>')],
)
def test_empty_description_list_keeps_tags(attrs, expected):
    assert dl({}, attrs) == expected
