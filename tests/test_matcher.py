from contact_scout.matcher import PhraseMatcher, PhraseTable, normalize_text


def test_normalize_is_diacritic_and_case_insensitive():
    assert normalize_text("Fale Conosco") == normalize_text("fale conosco") == "fale conosco"
    assert normalize_text("  Atendimento\tao   Cliente\n") == "atendimento ao cliente"
    assert normalize_text("Orçamento Grátis") == "orcamento gratis"
    assert normalize_text(None) == ""


def test_match_phrases_portuguese():
    matched = PhraseMatcher().match_phrases("Entre em contato conosco agora")
    assert "contato" in matched
    assert "entre em contato" in matched


def test_match_phrases_follow_table_order_without_duplicates():
    matcher = PhraseMatcher(PhraseTable(phrases=("contact us", "contact", "Contact"), path_hints=()))
    assert matcher.table.phrases == ("contact us", "contact")
    assert matcher.match_phrases("CONTACT US today") == ["contact us", "contact"]


def test_match_phrases_on_accented_text():
    matched = PhraseMatcher().match_phrases("Solicite um orçamento")
    assert "orcamento" in matched
    assert "solicite um orcamento" in matched


def test_no_match_for_unrelated_text():
    matcher = PhraseMatcher()
    assert matcher.match_phrases("Blog /blog") == []
    assert matcher.match_phrases("") == []


def test_is_priority_url():
    matcher = PhraseMatcher()
    assert matcher.is_priority_url("Our team https://a.com/fale-conosco")
    assert matcher.is_priority_url("Contact Us https://a.com/page")
    assert matcher.is_priority_url("https://a.com/Suporte/tickets")
    assert not matcher.is_priority_url("Blog https://a.com/blog")


def test_extended_table_adds_locale_without_losing_defaults():
    table = PhraseTable().extended(phrases=["Kontakt", "Impressum"], path_hints=["/kontakt"])
    matcher = PhraseMatcher(table)
    assert matcher.match_phrases("Kontakt aufnehmen") == ["kontakt"]
    assert matcher.is_priority_url("https://a.de/kontakt")
    assert "contact us" in table.phrases
