"""Base rule — abstract class implementing the Strategy Pattern.

Each rule derives one signal from the current values of the nodes it
depends on. Rules are pure and independently testable; the engine wires
them into a dependency graph.
"""

from abc import ABC, abstractmethod
from typing import Mapping

from signup_form.models.signals import NodeName, Signal, SignalValue


class BaseRule(ABC):
    """Abstract base for all derived-signal rules.

    Contract:
        - compute() is deterministic: same input → same output
        - compute() reads only the nodes listed in depends_on
        - compute() never raises for any string or bool input
    """

    @property
    @abstractmethod
    def signal(self) -> Signal:
        """Signal this rule produces."""
        ...

    @property
    @abstractmethod
    def depends_on(self) -> tuple[NodeName, ...]:
        """Inputs and signals this rule reads."""
        ...

    @abstractmethod
    def compute(self, values: Mapping[NodeName, SignalValue]) -> SignalValue:
        """Derive the signal value.

        Args:
            values: Current value of every node, at least those in depends_on

        Returns:
            The new value of self.signal
        """
        ...

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    # ── Helper Methods ──

    def _text(self, values: Mapping[NodeName, SignalValue], node: NodeName) -> str:
        """Read a node as text, treating a missing value as empty."""
        value = values.get(node)
        return value if isinstance(value, str) else ""

    def _flag(self, values: Mapping[NodeName, SignalValue], node: NodeName) -> bool:
        """Read a node as a boolean."""
        return bool(values.get(node, False))
