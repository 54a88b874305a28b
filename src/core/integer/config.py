"""
Execution Config — выбор политики по режиму исполнения VM

VM исполняет код в одном из двух режимов:
- throwing (по умолчанию): NaN / переполнение → исключение (Checked)
- quiet: NaN / переполнение → NaN-результат (Quiet)

Выбор делается один раз в точке привязки оператора, дальше политика
передаётся в фреймворк как тип.
"""

import logging
from dataclasses import dataclass
from typing import Type

from src.core.integer.behavior import Checked, OperationBehavior, Quiet

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ExecutionConfig:
    """Конфигурация режима исполнения целочисленных операций."""

    # True → quiet-режим (тихие NaN)
    quiet: bool = False

    def __post_init__(self) -> None:
        logger.debug("integer execution mode: %s", self.behavior.name)

    @property
    def behavior(self) -> Type[OperationBehavior]:
        return behavior_for(self.quiet)


def behavior_for(quiet: bool) -> Type[OperationBehavior]:
    """
    Политика для режима исполнения.

    Examples:
        >>> behavior_for(True).name
        'quiet'
        >>> behavior_for(False).name
        'checked'
    """
    return Quiet if quiet else Checked
