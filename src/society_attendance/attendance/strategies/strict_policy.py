from __future__ import annotations

from typing import Optional

from ...records.model import Registration
from .base import RegistrationPolicy


class StrictCancellationPolicy(RegistrationPolicy):
    """Either cancellation flag excludes the participant."""

    def counts_as_attendance(self, registration: Optional[Registration]) -> bool:
        if registration is None:
            return False
        return not (registration.cancelled or registration.cancelled_on_time)
