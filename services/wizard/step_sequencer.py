# -*- coding: utf-8 -*-
"""
Step Sequencer - computes the active, ordered step list.

Pure function of the two selection sets. Output order follows the
registry's canonical orders, never the order of the selections.
"""

from typing import Iterable, List, Optional

from services.wizard.step_registry import (
    STEP_REGISTRY,
    Category,
    StepDefinition,
    StepRegistry,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def _optional_steps(
    registry: StepRegistry,
    category: str,
    order: Iterable[str],
    selections: Iterable[str],
) -> List[StepDefinition]:
    selected = set(selections or [])
    steps = []
    for token in order:
        if token not in selected:
            continue
        step = registry.step_for_token(category, token)
        if step:
            steps.append(step)

    ignored = selected.difference(order)
    if ignored:
        logger.debug(f"Selections without a {category} detail step: {sorted(ignored)}")
    return steps


def sequence_steps(
    income_selections: Optional[Iterable[str]],
    relief_selections: Optional[Iterable[str]],
    registry: StepRegistry = STEP_REGISTRY,
) -> List[StepDefinition]:
    """
    Build the active step list.

    Order:
        1. the three fixed lead steps
        2. income detail steps, canonical income order
        3. relief detail steps, canonical relief order
        4. the two fixed tail steps

    Args:
        income_selections: Chosen income tokens (any order, duplicates ignored)
        relief_selections: Chosen relief tokens (any order, duplicates ignored)
        registry: Step catalog

    Returns:
        Ordered list of StepDefinition; no id appears twice
    """
    steps = registry.lead_steps()
    steps.extend(_optional_steps(registry, Category.INCOME, registry.income_order(), income_selections))
    steps.extend(_optional_steps(registry, Category.RELIEF, registry.relief_order(), relief_selections))
    steps.extend(registry.tail_steps())
    return steps


def step_ids(steps: Iterable[StepDefinition]) -> List[str]:
    """Ids of a step list, in order."""
    return [step.id for step in steps]


def section_ids(steps: Iterable[StepDefinition]) -> List[str]:
    """Completion-flag ids of the steps that set one."""
    return [step.section_id for step in steps if step.section_id]
