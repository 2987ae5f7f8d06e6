"""In-text citation generation (NBR 10520 style)."""
from __future__ import annotations

from typing import List, Optional, Tuple

from .authors import capitalize_surname, to_citation_form
from .models import CitationFields, CitationVariant

APUD_PLACEHOLDER = "AUTOR_SECUNDÁRIO, ANO"


class CitationFormatter:
    """Build the five citation variants from author, year, page and quote.

    Every variant returns an empty string until both the author and the year
    are filled in; callers treat ``""`` as "not ready yet".
    """

    VARIANTS: Tuple[Tuple[str, str, str, str, str], ...] = (
        (
            "direct-short",
            "direct_short",
            "Citação Direta Curta",
            "Até 3 linhas, entre aspas",
            '"Texto citado" (SILVA, 2023, p. 45).',
        ),
        (
            "direct-long",
            "direct_long",
            "Citação Direta Longa",
            "Mais de 3 linhas, recuo 4cm",
            "Texto citado com recuo de 4cm, fonte menor, sem aspas (SILVA, 2023, p. 45).",
        ),
        (
            "indirect",
            "indirect",
            "Citação Indireta",
            "Paráfrase do autor",
            "(SILVA, 2023)",
        ),
        (
            "author-text",
            "author_in_text",
            "Autor no Texto",
            "Nome do autor na frase",
            "Segundo Silva (2023, p. 45),",
        ),
        (
            "apud",
            "apud",
            "Apud (Citação de Citação)",
            "Citar autor através de outro",
            "(SILVA, 2023, p. 45 apud SANTOS, 2024)",
        ),
    )

    def generate(self, fields: CitationFields) -> List[CitationVariant]:
        variants = []
        for key, method, label, description, example in self.VARIANTS:
            text = getattr(self, method)(fields)
            variants.append(
                CitationVariant(
                    key=key,
                    label=label,
                    description=description,
                    text=text,
                    example=example,
                )
            )
        return variants

    def direct_short(self, fields: CitationFields) -> str:
        prepared = self._prepare(fields)
        if prepared is None:
            return ""
        author, year, page_ref = prepared
        if fields.quote:
            return f'"{fields.quote}" ({author}, {year}{page_ref}).'
        return f"({author}, {year}{page_ref})"

    def direct_long(self, fields: CitationFields) -> str:
        # Block indentation is left to the renderer.
        prepared = self._prepare(fields)
        if prepared is None:
            return ""
        author, year, page_ref = prepared
        if fields.quote:
            return f"{fields.quote} ({author}, {year}{page_ref})."
        return f"({author}, {year}{page_ref})"

    def indirect(self, fields: CitationFields) -> str:
        prepared = self._prepare(fields)
        if prepared is None:
            return ""
        author, year, _ = prepared
        return f"({author}, {year})"

    def author_in_text(self, fields: CitationFields) -> str:
        prepared = self._prepare(fields)
        if prepared is None:
            return ""
        author, year, page_ref = prepared
        return f"Segundo {capitalize_surname(author)} ({year}{page_ref}),"

    def apud(self, fields: CitationFields) -> str:
        prepared = self._prepare(fields)
        if prepared is None:
            return ""
        author, year, page_ref = prepared
        return f"({author}, {year}{page_ref} apud {APUD_PLACEHOLDER})"

    @staticmethod
    def _prepare(fields: CitationFields) -> Optional[Tuple[str, str, str]]:
        author = to_citation_form(fields.author)
        year = fields.year or ""
        if not author or not year:
            return None
        page_ref = f", p. {fields.page}" if fields.page else ""
        return author, year, page_ref
