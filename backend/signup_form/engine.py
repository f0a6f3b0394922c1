"""Validation Engine — holds the form inputs and keeps derived signals current.

The engine models the form as a small dependency graph: four input nodes and
one node per registered rule. Every mutation recomputes the nodes downstream
of the changed input in topological order, then notifies listeners of the
signals whose value actually changed.

Usage:
    engine = ValidationEngine()
    engine.subscribe(Signal.FORM_VALID, lambda ok: button.set_enabled(ok))
    engine.set_email(" User@Example.COM ")
    engine.normalized_email  # "user@example.com"
"""

from collections import deque
from graphlib import CycleError, TopologicalSorter
from typing import Callable, Optional

import structlog

from signup_form.models.signals import (
    INPUT_DEFAULTS,
    InputField,
    NodeName,
    Signal,
    SignalValue,
    SignupSnapshot,
)
from signup_form.services.event_bus import EventBus, SignalListener
from signup_form.validators import BaseRule, default_rules

logger = structlog.get_logger()

# Inputs whose values must never reach the logs
_SECRET_INPUTS = {InputField.PASSWORD, InputField.PASSWORD_CONFIRMATION}


class ValidationEngine:
    """Reactive validation graph for the sign-up form.

    Design principles:
        - Derived signals are pure functions of the current inputs
        - Reads never recompute; values are always current after a set call
        - Listeners only hear about signals whose value changed
        - Single writer: set calls made from a listener are queued and
          applied after the running pass finishes
    """

    def __init__(self, rules: Optional[list[BaseRule]] = None, event_bus: Optional[EventBus] = None):
        """Initialize with the default rules or a custom list.

        Args:
            rules: Optional list of rules. If None, uses default_rules().
            event_bus: Optional bus for change notifications. A private one is created if None.

        Raises:
            ValueError: If rules produce the same signal twice, depend on an
                unknown node, or form a cycle.
        """
        self.rules: dict[Signal, BaseRule] = {}
        for rule in rules if rules is not None else default_rules():
            if rule.signal in self.rules:
                raise ValueError(f"Duplicate rule for signal '{rule.signal.value}'")
            self.rules[rule.signal] = rule

        self.event_bus = event_bus or EventBus()
        self._order = self._topological_order()
        self._dependents = self._build_dependents()

        self._values: dict[NodeName, SignalValue] = dict(INPUT_DEFAULTS)
        for signal in self._order:
            self._values[signal] = self.rules[signal].compute(self._values)

        self._propagating = False
        self._pending: deque[tuple[InputField, SignalValue]] = deque()

    # ── Graph construction ──

    def _topological_order(self) -> list[Signal]:
        """Order rules so every rule comes after the signals it reads."""
        known: set[NodeName] = set(InputField) | set(self.rules)
        for rule in self.rules.values():
            unknown = [dep for dep in rule.depends_on if dep not in known]
            if unknown:
                raise ValueError(f"Rule '{rule.name}' depends on unknown node(s): {unknown}")

        sorter = TopologicalSorter({signal: rule.depends_on for signal, rule in self.rules.items()})
        try:
            order = list(sorter.static_order())
        except CycleError as e:
            cycle = [node.value for node in e.args[1]]
            raise ValueError(f"Rule dependency cycle between: {cycle}") from e
        return [node for node in order if node in self.rules]

    def _build_dependents(self) -> dict[NodeName, list[Signal]]:
        dependents: dict[NodeName, list[Signal]] = {}
        for signal in self._order:
            for dep in self.rules[signal].depends_on:
                dependents.setdefault(dep, []).append(signal)
        return dependents

    def affected_by(self, field: InputField) -> list[Signal]:
        """Signals transitively downstream of an input, in recompute order."""
        affected: set[Signal] = set()
        frontier: list[NodeName] = [field]
        while frontier:
            node = frontier.pop()
            for dependent in self._dependents.get(node, []):
                if dependent not in affected:
                    affected.add(dependent)
                    frontier.append(dependent)
        return [signal for signal in self._order if signal in affected]

    # ── Mutation ──

    def set(self, field: InputField, value: SignalValue) -> None:
        """Store one input and propagate the change.

        Accepts any string (or bool for the terms toggle); never raises.

        Called from inside a listener, the change is queued and this call
        returns before it is applied. The outer set call applies it before
        returning, so values read right after a nested call are still the old ones.
        """
        field = InputField(field)
        value = self._coerce(field, value)

        if self._propagating:
            self._pending.append((field, value))
            logger.debug("input_change_queued", field=field.value)
            return

        self._propagating = True
        try:
            self._apply(field, value)
            while self._pending:
                self._apply(*self._pending.popleft())
        finally:
            self._propagating = False

    def set_email(self, text: Optional[str]) -> None:
        self.set(InputField.EMAIL, text)

    def set_password(self, text: Optional[str]) -> None:
        self.set(InputField.PASSWORD, text)

    def set_password_confirmation(self, text: Optional[str]) -> None:
        self.set(InputField.PASSWORD_CONFIRMATION, text)

    def set_agree_terms(self, flag: bool) -> None:
        self.set(InputField.AGREE_TERMS, flag)

    def reset(self) -> None:
        """Restore every input to its default, notifying like regular edits."""
        for field, default in INPUT_DEFAULTS.items():
            self.set(field, default)

    @staticmethod
    def _coerce(field: InputField, value) -> SignalValue:
        if field is InputField.AGREE_TERMS:
            return bool(value)
        # A widget with no text reports None
        return "" if value is None else str(value)

    def _apply(self, field: InputField, value: SignalValue) -> None:
        self._values[field] = value
        if field in _SECRET_INPUTS:
            logger.debug("input_changed", field=field.value, length=len(value))
        else:
            logger.debug("input_changed", field=field.value, value=value)

        changed: list[Signal] = []
        for signal in self.affected_by(field):
            new_value = self.rules[signal].compute(self._values)
            if new_value != self._values[signal]:
                self._values[signal] = new_value
                changed.append(signal)

        logger.debug(
            "signals_recomputed",
            field=field.value,
            changed=[s.value for s in changed],
        )

        # Notify only once the whole graph is consistent
        for signal in changed:
            logger.debug("signal_changed", signal=signal.value, value=self._values[signal])
            self.event_bus.publish(signal.value, self._values[signal])

    # ── Reads ──

    def value(self, node: NodeName) -> SignalValue:
        """Current value of any input or signal."""
        return self._values[node]

    @property
    def email(self) -> str:
        return self._values[InputField.EMAIL]

    @property
    def password(self) -> str:
        return self._values[InputField.PASSWORD]

    @property
    def password_confirmation(self) -> str:
        return self._values[InputField.PASSWORD_CONFIRMATION]

    @property
    def agree_terms(self) -> bool:
        return self._values[InputField.AGREE_TERMS]

    @property
    def normalized_email(self) -> str:
        return self._values[Signal.NORMALIZED_EMAIL]

    @property
    def email_valid(self) -> bool:
        return self._values[Signal.EMAIL_VALID]

    @property
    def password_valid(self) -> bool:
        return self._values[Signal.PASSWORD_VALID]

    @property
    def passwords_match(self) -> bool:
        return self._values[Signal.PASSWORDS_MATCH]

    @property
    def form_valid(self) -> bool:
        return self._values[Signal.FORM_VALID]

    def snapshot(self) -> SignupSnapshot:
        """All inputs and derived values as a model."""
        return SignupSnapshot(**{node.value: value for node, value in self._values.items()})

    # ── Subscriptions ──

    def subscribe(self, signal: Signal, listener: SignalListener, replay: bool = True) -> Callable[[], None]:
        """Listen for changes of a derived signal.

        Args:
            signal: Signal to observe
            listener: Called with the new value on every change
            replay: Also call the listener right away with the current value

        Returns:
            A callable that removes this subscription only
        """
        if signal not in self.rules:
            raise ValueError(f"No rule produces signal '{signal.value}'")

        token = self.event_bus.subscribe(signal.value, listener)
        if replay:
            self.event_bus.deliver(signal.value, self._values[signal], token)

        def unsubscribe() -> None:
            self.event_bus.remove(signal.value, token)

        return unsubscribe

    def unsubscribe(self, signal: Signal, listener: SignalListener) -> None:
        """Remove the oldest subscription of a listener. Prefer the handle subscribe() returns."""
        self.event_bus.unsubscribe(signal.value, listener)
