"""Work-log hours aggregation.

This module adds log working time onto module totals. A log counts
towards the module it names and, when it is a bugfix, towards every
module acting as a bugfix bucket.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import BUGFIX_ACTION_TYPE, BUGFIX_MODULE_MARKER
from core.types import Module, WorkLogEntry


def aggregate_hours(modules: Sequence[Module], logs: Iterable[WorkLogEntry]) -> None:
    """Accumulate log hours onto module totals in place.

    Totals are never reset here, so running this twice over the same
    modules counts every log twice. Decode fresh modules per cycle.

    Args:
        modules: Modules whose ``total_hours`` are updated.
        logs: Decoded log entries.
    """
    named_modules = [module for module in modules if module.name]
    modules_by_name = {module.name.lower(): module for module in named_modules}
    bugfix_modules = [
        module for module in named_modules if BUGFIX_MODULE_MARKER in module.name.lower()
    ]
    for log in logs:
        if not log.module_name:
            continue
        direct_module = modules_by_name.get(log.module_name.lower())
        if direct_module is not None:
            direct_module.total_hours += log.working_time
        if log.action_type.lower() == BUGFIX_ACTION_TYPE:
            for bugfix_module in bugfix_modules:
                bugfix_module.total_hours += log.working_time
