"""
Short-Circuit Chains and the Pending Expansion Queue
====================================================

Expansion is split into two phases:

1. **Collection**: each recognized macro call produces an ExpansionPlan, an
   immutable value holding the guard expressions and the terminal call.
   The plan is queued together with its call site.

2. **Apply**: once the debug flag's binding name is known, every plan is
   realized into a left-associated && chain:

       binding && guard1 && guard2 && terminal
       == ((binding && guard1) && guard2) && terminal

The flag identifier always comes first so nothing else is evaluated when
the flag is falsy; the terminal diagnostic call always comes last.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence

from debug_macros.expansion.ast import Expression, LogicalExpression
from debug_macros.expansion.site import CallSite


# =============================================================================
# Expansion Plans
# =============================================================================

@dataclass(frozen=True)
class ExpansionPlan:
    """
    Everything needed to expand one site, except the flag binding name.

    Attributes:
        guards: Checks evaluated between the flag and the terminal call
        terminal: The diagnostic call itself
    """
    guards: tuple[Expression, ...]
    terminal: Expression


def build_chain(guards: Sequence[Expression], terminal: Expression) -> ExpansionPlan:
    """Capture guards (in the given order) and a terminal call as a plan."""
    return ExpansionPlan(guards=tuple(guards), terminal=terminal)


def realize(plan: ExpansionPlan, binding_name: str, factory) -> LogicalExpression:
    """
    Fold a plan into a single && expression gated by binding_name.

    Args:
        plan: The plan produced during collection
        binding_name: Name of the debug flag binding
        factory: Node factory used to build identifiers and && nodes

    Returns:
        The left-folded LogicalExpression
    """
    operands = [factory.identifier(binding_name), *plan.guards, plan.terminal]

    chain = operands[0]
    for operand in operands[1:]:
        chain = factory.logical_expression("&&", chain, operand)
    return chain


# =============================================================================
# Pending Expansion Queue
# =============================================================================

@dataclass(frozen=True)
class PendingExpansion:
    """A call site paired with the plan that will replace it."""
    site: CallSite
    plan: ExpansionPlan


class PendingExpansionQueue:
    """
    Append-only, ordered list of pending expansions for one compilation unit.

    Entries are consumed exactly once by drain(); after draining the queue
    is empty and a second drain yields nothing.
    """

    def __init__(self):
        self._entries: list[PendingExpansion] = []

    def push(self, site: CallSite, plan: ExpansionPlan) -> None:
        self._entries.append(PendingExpansion(site, plan))

    def drain(self) -> Iterator[PendingExpansion]:
        """Empty the queue, returning its entries in insertion order."""
        entries, self._entries = self._entries, []
        return iter(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PendingExpansion]:
        return iter(list(self._entries))
