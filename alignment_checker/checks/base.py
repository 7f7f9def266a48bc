from abc import ABC, abstractmethod
from typing import List

from alignment_checker.design.element import Element


class ElementCheck(ABC):
    """
    Abstract base class for all alignment element checks.
    """

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.error_count = 0

    @abstractmethod
    def run(self, elements: List[Element]) -> None:
        """
        Perform the check on the whole element sequence.
        - elements: elements with Vp and length bounds already assigned
        Findings are recorded as error flags on the elements.
        """
        pass

    def get_error_count(self) -> int:
        """Get the number of errors found by this check"""
        return self.error_count
