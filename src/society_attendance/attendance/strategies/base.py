from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...records.model import Registration


class RegistrationPolicy(ABC):
    """Strategy Pattern: decide whether a registration counts as attendance."""

    @abstractmethod
    def counts_as_attendance(self, registration: Optional[Registration]) -> bool:
        raise NotImplementedError
