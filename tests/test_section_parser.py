from __future__ import annotations

from lunch_menu_digest.core.constants import DAYS
from lunch_menu_digest.scrapers.document import parse_document
from lunch_menu_digest.scrapers.section_parser import (
    ClassifierConfig,
    NodeClassifier,
    SectionExtractor,
    is_implicit_heading,
    parse_menu_section,
)

SECTION = "Dakota Café (Cohen Quad)"

# Same structure as the Exeter menu page
MOCK_EXETER_HTML = """
<html><body>
  <h2>Another Section</h2>
  <p>Some other content</p>

  <h2>Dakota Café (Cohen Quad)</h2>
  <p>Panini</p>
  <ul>
    <li>Halloumi, Pickled Walnut and Pesto (V)</li>
    <li>Tuna Melt (Tuesday-Friday only)</li>
  </ul>
  <h3>Main Course</h3>
  <ul>
    <li>Monday – Pasta Bolognese • Roasted Tomato Sauce • Parmesan</li>
    <li>Tuesday – Fish &amp; Chips • Mushy Peas • Tartare Sauce</li>
    <li>Wednesday – Roast Chicken • Roast Potatoes • Gravy</li>
    <li>Thursday – Beef Stir Fry • Egg Fried Rice</li>
    <li>Friday – Veggie Burger • Sweet Potato Fries — ~520kcal</li>
  </ul>
  <h3>Daily Options</h3>
  <ul>
    <li>Salad Bar</li>
    <li>Soup of the Day
        (~180 kcal)</li>
    <li>Fresh Bread Rolls</li>
  </ul>
  <p>Please note: all menu items are subject to change</p>

  <h2>Hall</h2>
  <p>Hall content here</p>
</body></html>
"""


def _lines(today: str, html: str = MOCK_EXETER_HTML, section: str = SECTION) -> list[str]:
    return parse_menu_section(parse_document(html), section, today)


def test_full_section_for_monday() -> None:
    assert _lines("Monday") == [
        "\n*Main Course*",
        "• Pasta Bolognese • Roasted Tomato Sauce • Parmesan",
        "\n*Daily Options*",
        "• Salad Bar",
        "• Soup of the Day",
        "• Fresh Bread Rolls",
    ]


def test_returns_items_only_for_requested_day() -> None:
    joined = "\n".join(_lines("Monday"))
    assert "Pasta Bolognese" in joined
    for other in ["Fish", "Roast Chicken", "Beef Stir Fry", "Veggie Burger"]:
        assert other not in joined


def test_day_scoped_item_has_prefix_and_calories_stripped() -> None:
    assert "• Veggie Burger • Sweet Potato Fries" in _lines("Friday")
    assert "• Fish & Chips • Mushy Peas • Tartare Sauce" in _lines("Tuesday")


def test_unscoped_items_appear_on_every_day() -> None:
    for day in DAYS:
        lines = _lines(day)
        assert "• Salad Bar" in lines
        assert "• Soup of the Day" in lines
        assert "• Fresh Bread Rolls" in lines


def test_weekend_keeps_headings_and_unscoped_items_only() -> None:
    assert _lines("Saturday") == [
        "\n*Main Course*",
        "\n*Daily Options*",
        "• Salad Bar",
        "• Soup of the Day",
        "• Fresh Bread Rolls",
    ]


def test_skip_section_drops_panini_block() -> None:
    joined = "\n".join(_lines("Monday"))
    assert "Panini" not in joined
    assert "Halloumi" not in joined
    assert "Tuna Melt" not in joined


def test_skip_line_drops_disclaimer() -> None:
    assert "subject to change" not in "\n".join(_lines("Monday"))


def test_stops_at_next_section_heading() -> None:
    assert "Hall content here" not in "\n".join(_lines("Monday"))


def test_missing_section_returns_empty() -> None:
    assert _lines("Monday", section="Nonexistent Café") == []
    assert _lines("Monday", html="<html><body><p>no headings</p></body></html>") == []


def test_section_name_is_substring_match_and_first_wins() -> None:
    html = """
    <body>
      <h2>Dakota Café (Cohen Quad) – this week</h2>
      <ul><li>First</li></ul>
      <h2>Dakota Café (Cohen Quad) archive</h2>
      <ul><li>Second</li></ul>
    </body>
    """
    assert _lines("Monday", html=html) == ["• First"]


def test_main_course_example() -> None:
    html = """
    <body>
      <h2>Cafe</h2>
      <h3>Main Course</h3>
      <ul><li>Monday – Pasta</li><li>Tuesday – Fish</li></ul>
    </body>
    """
    assert _lines("Monday", html=html, section="Cafe") == ["\n*Main Course*", "• Pasta"]


def test_nested_heading_is_not_a_boundary() -> None:
    html = """
    <body>
      <h2>Cafe</h2>
      <div><h2>Inner</h2><ul><li>Hidden</li></ul></div>
      <ul><li>Shown</li></ul>
      <h2>Next</h2>
      <ul><li>Other</li></ul>
    </body>
    """
    nodes = parse_document(html)
    section = SectionExtractor().extract(nodes, "Cafe")
    assert [n.kind for n in section] == ["div", "ul"]
    assert NodeClassifier().classify(section, "Monday") == ["• Shown"]


def test_later_subsection_after_skip_still_contributes() -> None:
    html = """
    <body>
      <h2>Cafe</h2>
      <p>PANINI</p>
      <ul><li>Ham &amp; Cheese</li></ul>
      <p>Extra prose that is not followed by a list</p>
      <p>Desserts</p>
      <ul><li>Crumble</li></ul>
    </body>
    """
    assert _lines("Monday", html=html, section="Cafe") == ["\n*Desserts*", "• Crumble"]


def test_free_text_paragraph_is_trimmed_but_kept_verbatim() -> None:
    html = """
    <body>
      <h2>Cafe</h2>
      <p>  Closed for refurbishment.
Reopening in January.  </p>
    </body>
    """
    assert _lines("Monday", html=html, section="Cafe") == ["Closed for refurbishment.\nReopening in January."]


def test_custom_config_disables_skip_rules() -> None:
    config = ClassifierConfig(skip_section_pattern=None, skip_line_pattern=None)
    nodes = parse_document(MOCK_EXETER_HTML)
    section = SectionExtractor().extract(nodes, SECTION)
    lines = NodeClassifier(config).classify(section, "Monday")
    assert lines[0] == "\n*Panini*"
    assert "• Halloumi, Pickled Walnut and Pesto (V)" in lines
    assert lines[-1] == "Please note: all menu items are subject to change"


def test_is_implicit_heading_predicate() -> None:
    assert is_implicit_heading("Daily Specials", "ul") is True
    assert is_implicit_heading("Daily Specials", "ol") is True
    assert is_implicit_heading("Daily Specials", "p") is False
    assert is_implicit_heading("Daily Specials", None) is False
    assert is_implicit_heading("Soup • Bread", "ul") is False
    assert is_implicit_heading("Monday – Soup", "ul") is False
    assert is_implicit_heading("x" * 60, "ul") is False
    assert is_implicit_heading("x" * 59, "ul") is True


def test_is_implicit_heading_threshold_is_configurable() -> None:
    config = ClassifierConfig(heading_length_threshold=10)
    assert is_implicit_heading("Daily Specials", "ul", config) is False
    assert is_implicit_heading("Desserts", "ul", config) is True


def test_section_wrapped_in_its_own_container() -> None:
    html = """
    <body>
      <div><h2>Hall</h2><ul><li>Monday – Stew</li></ul></div>
      <div>
        <h2>Dakota Café (Cohen Quad)</h2>
        <h3>Main Course</h3>
        <ul><li>Monday – Pasta</li></ul>
      </div>
    </body>
    """
    assert _lines("Monday", html=html) == ["\n*Main Course*", "• Pasta"]


def test_footer_headings_do_not_hide_main_section() -> None:
    html = """
    <body>
      <main>
        <h2>Dakota Café (Cohen Quad)</h2>
        <h3>Main Course</h3>
        <ul><li>Monday – Pasta</li></ul>
        <h2>Hall</h2>
        <ul><li>Monday – Stew</li></ul>
      </main>
      <footer>
        <h2>Contact</h2><p>Porters' lodge</p>
        <h2>Opening hours</h2><p>Term time only</p>
        <h2>Links</h2><p>Intranet</p>
      </footer>
    </body>
    """
    assert _lines("Monday", html=html) == ["\n*Main Course*", "• Pasta"]
