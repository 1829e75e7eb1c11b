from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CancellationMode
from ..core.exceptions import ValidationError
from .strategies.base import RegistrationPolicy
from .strategies.cancelled_only_policy import CancelledOnlyPolicy
from .strategies.strict_policy import StrictCancellationPolicy


@dataclass
class RegistrationPolicyFactory:
    """Factory Pattern: choose the registration policy from configuration."""

    def for_mode(self, mode: CancellationMode | str) -> RegistrationPolicy:
        try:
            mode = CancellationMode(mode)
        except ValueError as exc:
            raise ValidationError(f"Unknown cancellation mode {mode!r}") from exc

        if mode == CancellationMode.CANCELLED_ONLY:
            return CancelledOnlyPolicy()
        return StrictCancellationPolicy()
