"""
VM integer core

Ограниченное по разрядности (257 бит) знаковое целое с NaN и политиками
Checked / Quiet для обработки NaN-операндов и переполнения.
"""

# Behavior policies
from src.core.integer.behavior import (
    BEHAVIORS,
    Checked,
    IntegerError,
    IntegerInvariantViolation,
    IntegerOverflow,
    NaNOperand,
    OperationBehavior,
    Quiet,
)

# Bit-width & overflow
from src.core.integer.bits import (
    DIGIT_BITS,
    INTEGER_BITS,
    OVERFLOW_BITSIZE_LIMIT,
    bitsize,
    check_overflow,
    twos_complement,
)

# Execution config
from src.core.integer.config import ExecutionConfig, behavior_for

# Value representation
from src.core.integer.value import IntegerData, Ordering, process_value, require_int

# Operation framework
from src.core.integer.operations import (
    binary_op,
    construct_double_nan,
    construct_single_nan,
    extract_value,
    process_double_result,
    process_single_result,
    unary_op,
)

__all__ = [
    # Behavior — Policies
    "BEHAVIORS",
    "Checked",
    "OperationBehavior",
    "Quiet",
    # Behavior — Exceptions
    "IntegerError",
    "IntegerInvariantViolation",
    "IntegerOverflow",
    "NaNOperand",
    # Bits — Constants
    "DIGIT_BITS",
    "INTEGER_BITS",
    "OVERFLOW_BITSIZE_LIMIT",
    # Bits — Functions
    "bitsize",
    "check_overflow",
    "twos_complement",
    # Config
    "ExecutionConfig",
    "behavior_for",
    # Value
    "IntegerData",
    "Ordering",
    "process_value",
    "require_int",
    # Operations
    "binary_op",
    "construct_double_nan",
    "construct_single_nan",
    "extract_value",
    "process_double_result",
    "process_single_result",
    "unary_op",
]
