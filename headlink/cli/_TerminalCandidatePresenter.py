"""Candidate presenter that prints the match list to the terminal."""

from rich.console import Console

from headlink.api.heading.MatchResult import MatchResult
from headlink.api.host._AbstractCandidatePresenter import _AbstractCandidatePresenter
from headlink.utils.templating import render_template

CANDIDATES_TEMPLATE = """
{% if results %}
{{ results | length }} heading(s) matching '{{ query }}':
{% for match in results %}
  {{ loop.index0 }}. {{ match.path }} > {{ match.heading_text }}
{% endfor %}
{% else %}
No headings match '{{ query }}'.
{% endif %}
""".strip()


class _TerminalCandidatePresenter(_AbstractCandidatePresenter):
    """Numbered candidate list on stderr, redrawn after each query change."""

    def __init__(self, console: Console, limit: int = 20):
        self.console = console
        self.limit = limit

    def present(self, query: str, results: list[MatchResult]) -> None:
        shown = results[: self.limit]
        text = render_template(CANDIDATES_TEMPLATE, {"query": query, "results": shown})
        self.console.print(text, markup=False, highlight=False)
        if len(results) > len(shown):
            self.console.print(f"  ... {len(results) - len(shown)} more, refine the query", markup=False)
