"""Abstract base class for showing search candidates."""

from abc import ABC, abstractmethod

from ..heading.MatchResult import MatchResult


class _AbstractCandidatePresenter(ABC):
    """Shows the current match list of a search session.

    Called after every query change with the full replacement result set.
    """

    @abstractmethod
    def present(self, query: str, results: list[MatchResult]) -> None:
        pass
