"""Exceptions raised by the search engine and the puzzle parsers.

Not finding a path is a normal outcome and is reported through
``SearchResult.status``; nothing here is raised for it.
"""


class PuzzleSearchError(Exception):
    """Base class for all puzzle-search errors."""
    pass


class PuzzleInputError(PuzzleSearchError, ValueError):
    """Raised when puzzle text cannot be turned into an initial state."""
    pass


class StateSpaceContractError(PuzzleSearchError):
    """Raised when a state space reports a negative edge cost or heuristic."""
    pass


class MissingPredecessorError(PuzzleSearchError):
    """Raised when the predecessor chain of a reached state is broken."""
    pass


class SearchBudgetExceeded(PuzzleSearchError):
    """Raised when a search expands more states than its configured budget.

    Attributes:
        budget: The configured ``max_expansions``.
        expanded: Number of states expanded before the budget stopped the run.
    """

    def __init__(self, budget: int, expanded: int):
        super().__init__(f"Expansion budget of {budget} states exhausted")
        self.budget = budget
        self.expanded = expanded
