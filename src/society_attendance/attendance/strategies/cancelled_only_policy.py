from __future__ import annotations

from typing import Optional

from ...records.model import Registration
from .base import RegistrationPolicy


class CancelledOnlyPolicy(RegistrationPolicy):
    """Only an explicit cancellation excludes; `cancelled_on_time` is ignored."""

    def counts_as_attendance(self, registration: Optional[Registration]) -> bool:
        return registration is not None and not registration.cancelled
