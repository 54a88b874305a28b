"""
Operation Behavior — политики обработки NaN и переполнения

Каждая операция над IntegerData выполняется под одной из двух политик:
- Checked: NaN-операнд или переполнение → исключение (операция прерывается)
- Quiet: NaN-операнд или переполнение → результат NaN (тихая пропагация)

Политика передаётся в каждую точку входа фреймворка как класс
(type argument), а не как runtime-флаг. Экземпляры политик не создаются.

ИНВАРИАНТЫ:
1. Checked никогда не возвращает NaN из-за NaN-операнда или переполнения
2. Quiet никогда не бросает NaNOperand / IntegerOverflow
3. Политики не хранят состояния
"""

from typing import ClassVar, Final


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerError(Exception):
    """
    Базовая ошибка операций над IntegerData.

    Атрибут code — стабильный код для маппинга на коды исключений VM.
    """

    code: ClassVar[str] = "INTEGER_ERROR"


class NaNOperand(IntegerError):
    """Операнд операции — NaN при активной политике Checked."""

    code: ClassVar[str] = "NAN_OPERAND"


class IntegerOverflow(IntegerError):
    """Результат не помещается в 257 бит (bitsize >= 258)."""

    code: ClassVar[str] = "INTEGER_OVERFLOW"


class IntegerInvariantViolation(RuntimeError):
    """
    Нарушение контракта вызывающей стороной.

    Например, bitsize() от NaN: вызывающий обязан проверить is_nan() заранее.
    Это ошибка программиста, а не условие исполнения — не перехватывать.
    """


# =============================================================================
# POLICIES
# =============================================================================


class OperationBehavior:
    """
    Базовый класс политики.

    Хуки вызываются фреймворком:
    - on_nan_parameter(): хотя бы один операнд — NaN
    - on_integer_overflow(): сырой результат не проходит check_overflow

    Нормальный возврат из хука означает "подставить NaN".
    """

    name: ClassVar[str] = "abstract"
    quiet: ClassVar[bool] = False

    def __init__(self) -> None:
        raise TypeError(f"{type(self).__name__} is a policy type and is not instantiated")

    @classmethod
    def on_nan_parameter(cls) -> None:
        raise NotImplementedError

    @classmethod
    def on_integer_overflow(cls) -> None:
        raise NotImplementedError


class Checked(OperationBehavior):
    """Fail-fast: каждый хук бросает исключение."""

    name: ClassVar[str] = "checked"
    quiet: ClassVar[bool] = False

    @classmethod
    def on_nan_parameter(cls) -> None:
        raise NaNOperand("NaN operand is not allowed in checked operation")

    @classmethod
    def on_integer_overflow(cls) -> None:
        raise IntegerOverflow("integer overflow: result does not fit in 257 bits")


class Quiet(OperationBehavior):
    """Тихий режим: хуки ничего не делают, вызывающий подставляет NaN."""

    name: ClassVar[str] = "quiet"
    quiet: ClassVar[bool] = True

    @classmethod
    def on_nan_parameter(cls) -> None:
        pass

    @classmethod
    def on_integer_overflow(cls) -> None:
        pass


BEHAVIORS: Final[tuple[type[OperationBehavior], ...]] = (Checked, Quiet)
