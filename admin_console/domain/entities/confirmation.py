"""Domain state machine for escalating confirmation of destructive actions."""

from dataclasses import dataclass, field
from enum import Enum

from admin_console.domain.exceptions import InvalidTransitionError


class ConfirmationState(str, Enum):
    """States of a confirmation flow. The last three are terminal."""

    STEP1 = "step1"
    STEP2 = "step2"
    STEP3 = "step3"
    CANCELLED = "cancelled"
    CONFIRMED = "confirmed"
    DEACTIVATED = "deactivated"


_TERMINAL = frozenset({
    ConfirmationState.CANCELLED,
    ConfirmationState.CONFIRMED,
    ConfirmationState.DEACTIVATED,
})


@dataclass(frozen=True)
class StepCopy:
    """Text shown for a single step of the dialog."""

    title: str
    message: str


@dataclass(frozen=True)
class ConfirmationCopy:
    """Dialog copy for each of the three steps."""

    step1: StepCopy
    step2: StepCopy
    step3: StepCopy

    @classmethod
    def for_entity(cls, label: str, name: str = "") -> "ConfirmationCopy":
        """Default copy for deleting a record of type ``label``."""
        target = f"{label} '{name}'" if name else f"this {label}"
        return cls(
            step1=StepCopy(
                title=f"Delete {label}?",
                message=f"You are about to delete {target}.",
            ),
            step2=StepCopy(
                title="This cannot be undone",
                message=(
                    f"Deleting {target} also removes every record that "
                    "depends on it."
                ),
            ),
            step3=StepCopy(
                title="Choose how to proceed",
                message=(
                    f"You can delete {target} permanently or deactivate it "
                    "and keep its history."
                ),
            ),
        )


@dataclass
class ConfirmationFlow:
    """Three-step confirmation for one entity.

    STEP1 and STEP2 can continue or cancel. STEP3 only offers a permanent
    delete or a deactivation. Once terminal, the flow rejects every action;
    a new flow must be created for the next request.
    """

    entity_id: str
    copy: ConfirmationCopy
    state: ConfirmationState = field(default=ConfirmationState.STEP1)

    @property
    def is_terminal(self) -> bool:
        return self.state in _TERMINAL

    @property
    def current_copy(self) -> StepCopy | None:
        return {
            ConfirmationState.STEP1: self.copy.step1,
            ConfirmationState.STEP2: self.copy.step2,
            ConfirmationState.STEP3: self.copy.step3,
        }.get(self.state)

    def proceed(self) -> ConfirmationState:
        if self.state == ConfirmationState.STEP1:
            self.state = ConfirmationState.STEP2
        elif self.state == ConfirmationState.STEP2:
            self.state = ConfirmationState.STEP3
        else:
            raise InvalidTransitionError(self.state.value, "continue")
        return self.state

    def cancel(self) -> ConfirmationState:
        if self.state not in (ConfirmationState.STEP1, ConfirmationState.STEP2):
            raise InvalidTransitionError(self.state.value, "cancel")
        self.state = ConfirmationState.CANCELLED
        return self.state

    def delete_permanently(self) -> ConfirmationState:
        self._require_final_step("delete")
        self.state = ConfirmationState.CONFIRMED
        return self.state

    def deactivate_instead(self) -> ConfirmationState:
        self._require_final_step("deactivate")
        self.state = ConfirmationState.DEACTIVATED
        return self.state

    def _require_final_step(self, action: str) -> None:
        if self.state != ConfirmationState.STEP3:
            raise InvalidTransitionError(self.state.value, action)
