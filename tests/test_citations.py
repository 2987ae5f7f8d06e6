import pytest

from abnt_references.citations import CitationFormatter
from abnt_references.models import CitationFields

FULL = CitationFields(author="João Silva", year="2023", page="45", quote="Texto citado")
VARIANTS = ["direct_short", "direct_long", "indirect", "author_in_text", "apud"]


@pytest.mark.parametrize("method", VARIANTS)
@pytest.mark.parametrize(
    "fields",
    [
        CitationFields(author="", year="2023"),
        CitationFields(author="João Silva", year=""),
        CitationFields(),
    ],
)
def test_variants_need_author_and_year(method, fields):
    assert getattr(CitationFormatter(), method)(fields) == ""


def test_variants_with_all_fields():
    formatter = CitationFormatter()

    assert formatter.direct_short(FULL) == '"Texto citado" (SILVA, 2023, p. 45).'
    assert formatter.direct_long(FULL) == "Texto citado (SILVA, 2023, p. 45)."
    assert formatter.indirect(FULL) == "(SILVA, 2023)"
    assert formatter.author_in_text(FULL) == "Segundo Silva (2023, p. 45),"
    assert formatter.apud(FULL) == "(SILVA, 2023, p. 45 apud AUTOR_SECUNDÁRIO, ANO)"


def test_direct_variants_without_quote_or_page():
    formatter = CitationFormatter()
    fields = CitationFields(author="Silva", year="2020")

    assert formatter.direct_short(fields) == "(SILVA, 2020)"
    assert formatter.direct_long(fields) == "(SILVA, 2020)"
    assert formatter.author_in_text(fields) == "Segundo Silva (2020),"


def test_generate_returns_all_variants_in_order():
    variants = CitationFormatter().generate(FULL)

    assert [v.key for v in variants] == ["direct-short", "direct-long", "indirect", "author-text", "apud"]
    assert all(v.ready for v in variants)
    assert variants[2].text == "(SILVA, 2023)"


def test_generate_marks_incomplete_input_not_ready():
    variants = CitationFormatter().generate(CitationFields(author="João Silva"))

    assert not any(v.ready for v in variants)
    assert all(v.example for v in variants)
