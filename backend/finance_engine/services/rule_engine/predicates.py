"""Evaluation of typed adjuster predicates against a pricing context."""

import operator
from typing import Callable, Iterable

from finance_engine.core.enums import Comparator
from finance_engine.models.domain.catalog import AdjusterPredicate
from finance_engine.models.domain.pricing import PricingContext

_COMPARATORS: dict[Comparator, Callable[[object, object], bool]] = {
    Comparator.EQ: operator.eq,
    Comparator.GE: operator.ge,
    Comparator.LE: operator.le,
}


def predicate_holds(predicate: AdjusterPredicate, context: PricingContext) -> bool:
    """Check a single predicate, e.g. context.term >= 61."""
    compare = _COMPARATORS[predicate.comparator]
    return bool(compare(context.value_of(predicate.field), predicate.value))


def all_predicates_hold(
    predicates: Iterable[AdjusterPredicate],
    context: PricingContext,
) -> bool:
    """Short-circuiting conjunction; an empty predicate list always holds."""
    return all(predicate_holds(predicate, context) for predicate in predicates)
