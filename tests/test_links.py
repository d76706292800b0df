from hopspider.links import find_link, iter_links


PAGE = """
<html><body>
<a href="/relative/path">relative</a>
<a href="mailto:someone@example.com">mail</a>
<a class="nav" href="https://one.example.com/a">one</a>
<A HREF='http://two.example.com'>two</A>
<a href=http://three.example.com/x>three</a>
<link href="http://style.example.com/site.css">
</body></html>
"""


def test_iter_links_in_document_order():
    assert list(iter_links(PAGE)) == [
        "https://one.example.com/a",
        "http://two.example.com",
        "http://three.example.com/x",
    ]


def test_iter_links_is_lazy():
    links = iter_links(PAGE)
    assert next(links) == "https://one.example.com/a"


def test_anchor_split_across_lines():
    html = '<a\n   href="http://wrapped.example.com">x</a>'
    assert list(iter_links(html)) == ["http://wrapped.example.com"]


def test_find_link_returns_first_eligible():
    assert find_link(PAGE, lambda url: True) == "https://one.example.com/a"


def test_find_link_skips_ineligible():
    seen = {"https://one.example.com/a", "http://two.example.com"}
    assert find_link(PAGE, lambda url: url not in seen) == "http://three.example.com/x"


def test_find_link_stops_at_first_eligible():
    checked = []

    def should_visit(url):
        checked.append(url)
        return True

    find_link(PAGE, should_visit)
    assert checked == ["https://one.example.com/a"]


def test_find_link_none_eligible():
    assert find_link(PAGE, lambda url: False) is None


def test_find_link_no_anchors():
    assert find_link("<html><body><p>nothing here</p></body></html>", lambda url: True) is None


def test_empty_html():
    assert list(iter_links("")) == []
