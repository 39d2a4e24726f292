"""Тесты поверхностного сканера разметки."""
from contact_scout.parser.markup_scanner import extract_candidates, extract_title, scan_markup

PAGE = "https://site.test/"


def test_title_collapsed_and_untitled():
    assert extract_title("<html><head><title>\n  Fale   Conosco \n</title></head></html>") == "Fale Conosco"
    assert extract_title("<TITLE>First</TITLE><title>Second</title>") == "First"
    assert extract_title("<html><body>No title</body></html>") == "Untitled"
    assert extract_title("<title>   </title>") == "Untitled"


def test_anchor_text_strips_tags_and_nbsp():
    html = '<A HREF="/contact"><span class="icon"></span>Contact&nbsp;<b>Us</b></A>'
    (cand,) = extract_candidates(html, PAGE)
    assert cand.element == "link"
    assert cand.text == "Contact Us"
    assert cand.href == "/contact"
    assert cand.source_url == PAGE


def test_empty_anchor_is_dropped_but_text_only_kept():
    html = '<a></a><a name="top">Back to top</a><a href="/x"><img src="x.png"></a>'
    cands = extract_candidates(html, PAGE)
    assert [(c.text, c.href) for c in cands] == [("Back to top", ""), ("", "/x")]


def test_button_href_fallbacks():
    html = (
        '<button data-href="/fale-conosco">Fale conosco</button>'
        '<button href="/a" data-href="/b">Both</button>'
        "<button>Plain</button>"
    )
    cands = extract_candidates(html, PAGE)
    assert [(c.element, c.text, c.href) for c in cands] == [
        ("button", "Fale conosco", "/fale-conosco"),
        ("button", "Both", "/a"),
        ("button", "Plain", ""),
    ]


def test_role_button_prefers_data_href():
    html = '<div role="Button" href="/a" data-href="/chat">Live chat</div><span role="link">No</span>'
    (cand,) = extract_candidates(html, PAGE)
    assert (cand.element, cand.text, cand.href) == ("role-button", "Live chat", "/chat")


def test_input_text_fallbacks_and_type_filter():
    html = (
        '<input type="submit" value="Send message" formaction="/contact/send">'
        '<input type="BUTTON" aria-label="Chat with us">'
        '<input type="button" name="callback">'
        '<input type="text" value="ignored">'
        '<input type="submit">'
    )
    cands = extract_candidates(html, PAGE)
    assert [(c.element, c.text, c.href) for c in cands] == [
        ("input", "Send message", "/contact/send"),
        ("input", "Chat with us", ""),
        ("input", "callback", ""),
    ]


def test_passes_run_in_fixed_order():
    html = (
        '<input type="submit" value="Go">'
        '<div role="button">Role</div>'
        "<button>Btn</button>"
        '<a href="/a">Link</a>'
    )
    kinds = [c.element for c in extract_candidates(html, PAGE)]
    assert kinds == ["link", "button", "role-button", "input"]


def test_scan_markup_returns_title_and_candidates():
    title, cands = scan_markup('<title>Home</title><a href="/contact">Contact</a>', PAGE)
    assert title == "Home"
    assert len(cands) == 1
