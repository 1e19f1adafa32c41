class RelatednessError(Exception):
    """Base exception for relatedness calculator failures."""


class UnknownIndividualError(RelatednessError, ValueError):
    """Raised when a query names an individual that is not in the tree."""

    def __init__(self, individual_id: str):
        super().__init__(f"Unknown individual: {individual_id!r}")
        self.individual_id = individual_id


class TreeFormatError(RelatednessError):
    """Raised when a tree document cannot be read into a FamilyTree."""


class AnalysisExecutionError(RelatednessError):
    """Raised when the analysis pipeline fails."""
