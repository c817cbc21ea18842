"""Abstract UI driver used by the booking flow."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ElementSnapshot:
    """Id and text of a located element at the time it was read"""
    id: str
    text: str


class UIDriver(ABC):
    """
    Browser capabilities the booking flow needs.

    Selectors are CSS selectors. Implementations raise TimeoutError from
    ``wait_visible`` and RuntimeError when the element to act on is missing.
    """

    @abstractmethod
    async def goto(self, url: str):
        """Navigate to ``url`` and wait for the page to load."""

    @abstractmethod
    async def locate(self, selector: str) -> List[ElementSnapshot]:
        """Return a snapshot of every element matching ``selector``, in order."""

    @abstractmethod
    async def click(self, selector: str):
        """Click the first element matching ``selector``."""

    @abstractmethod
    async def click_text(self, text: str, within: Optional[str] = None):
        """Click the first element whose text contains ``text``."""

    @abstractmethod
    async def fill(self, selector: str, value: str):
        """Replace the value of an input element."""

    @abstractmethod
    async def read_text(self, selector: str) -> Optional[str]:
        """Text content of the first match, None if nothing matches."""

    @abstractmethod
    async def wait_visible(self, selector: str, timeout: float):
        """Wait until an element matching ``selector`` is visible."""
