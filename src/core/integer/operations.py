"""
Operation Framework — общий каркас unary/binary операций

Все конкретные операторы (арифметика, битовые операции) строятся так:

    binary_op(Checked, lhs, rhs,
              lambda x, y: x + y,
              construct_single_nan,
              process_single_result)

Порядок выполнения:
1. Извлечение целых значений операндов (NaN → on_nan_parameter,
   при Quiet — немедленный возврат nan_constructor() без вызова callback)
2. callback над сырыми int → сырой результат
3. result_processor: проверка переполнения и упаковка в IntegerData
   (переполнение → on_integer_overflow, при Quiet — nan_constructor())
"""

from typing import Callable, Optional, Tuple, Type, TypeVar

from src.core.integer.behavior import IntegerInvariantViolation, OperationBehavior
from src.core.integer.bits import check_overflow
from src.core.integer.value import NAN, IntegerData, require_int

RInt = TypeVar("RInt")
R = TypeVar("R")

ResultProcessor = Callable[[Type[OperationBehavior], RInt, Callable[[], R]], R]


# =============================================================================
# NaN CONSTRUCTORS
# =============================================================================


def construct_single_nan() -> IntegerData:
    return IntegerData.nan()


def construct_double_nan() -> Tuple[IntegerData, IntegerData]:
    return construct_single_nan(), construct_single_nan()


# =============================================================================
# OPERAND EXTRACTION
# =============================================================================


def extract_value(
    behavior: Type[OperationBehavior], operand: IntegerData
) -> Optional[int]:
    """
    Целое значение операнда с учётом политики.

    Returns:
        int операнда, или None если операнд NaN и политика разрешила
        подстановку NaN (вызывающий должен вернуть nan_constructor())

    Raises:
        NaNOperand: Если операнд NaN и политика Checked
    """
    if operand._value is NAN:
        behavior.on_nan_parameter()
        return None
    return operand._value


# =============================================================================
# OPERATIONS
# =============================================================================


def unary_op(
    behavior: Type[OperationBehavior],
    lhs: IntegerData,
    callback: Callable[[int], RInt],
    nan_constructor: Callable[[], R],
    result_processor: ResultProcessor,
) -> R:
    """
    Унарная операция: проверка операнда на NaN, callback, упаковка результата.

    Args:
        behavior: Политика (Checked / Quiet)
        lhs: Операнд
        callback: Вычисление над сырым int
        nan_constructor: Конструктор NaN-результата нужной арности
        result_processor: Post-processor (process_single_result / process_double_result)
    """
    x = extract_value(behavior, lhs)
    if x is None:
        return nan_constructor()

    return result_processor(behavior, callback(x), nan_constructor)


def binary_op(
    behavior: Type[OperationBehavior],
    lhs: IntegerData,
    rhs: IntegerData,
    callback: Callable[[int, int], RInt],
    nan_constructor: Callable[[], R],
    result_processor: ResultProcessor,
) -> R:
    """
    Бинарная операция: проверка операндов на NaN, callback, упаковка результата.

    Операнды проверяются слева направо; callback не вызывается, если
    хотя бы один из них NaN.
    """
    x = extract_value(behavior, lhs)
    if x is None:
        return nan_constructor()
    y = extract_value(behavior, rhs)
    if y is None:
        return nan_constructor()

    return result_processor(behavior, callback(x, y), nan_constructor)


# =============================================================================
# RESULT PROCESSORS
# =============================================================================


def process_single_result(
    behavior: Type[OperationBehavior],
    result: int,
    nan_constructor: Callable[[], IntegerData],
) -> IntegerData:
    """
    Упаковка одного сырого результата в IntegerData.

    Raises:
        TypeError: Если callback вернул не int
        IntegerOverflow: Если результат > 257 бит и политика Checked
    """
    require_int(result)
    if check_overflow(result):
        return IntegerData._raw(result)

    behavior.on_integer_overflow()
    return nan_constructor()


def process_double_result(
    behavior: Type[OperationBehavior],
    result: Tuple[int, int],
    nan_constructor: Callable[[], Tuple[IntegerData, IntegerData]],
) -> Tuple[IntegerData, IntegerData]:
    """
    Упаковка пары сырых результатов (например, частное и остаток).

    Через политику проверяется только первый элемент: при его переполнении
    оба результата становятся NaN. Второй элемент считается согласованным
    с первым и в политику не передаётся; если он всё же не помещается
    в 257 бит, это нарушение контракта вызывающего оператора.

    Raises:
        TypeError: Если callback вернул не пару int
        IntegerOverflow: Если первый результат > 257 бит и политика Checked
        IntegerInvariantViolation: Если первый результат валиден, а второй нет
    """
    r1, r2 = result
    require_int(r1)
    require_int(r2)
    if not check_overflow(r1):
        behavior.on_integer_overflow()
        return nan_constructor()

    if not check_overflow(r2):
        raise IntegerInvariantViolation(
            "second result of a double-result operation overflowed while the first did not"
        )
    return IntegerData._raw(r1), IntegerData._raw(r2)
