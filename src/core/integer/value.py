"""
IntegerData — значение ячейки стека VM

Значение — одно из двух:
- NaN: явный sentinel "не число" (tagged, не магическое целое)
- Number(int): знаковое целое с bitsize <= 257

ИНВАРИАНТЫ:
1. Number всегда проходит check_overflow (проверяется при каждом создании)
2. NaN == NaN структурно, но NaN не упорядочен ни с чем (partial_cmp → None)
3. is_neg() и is_zero() для NaN возвращают False
4. bitsize()/ubitsize()/magnitude для NaN → IntegerInvariantViolation
"""

import re
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Callable, Optional, Type, TypeVar, Union

from src.core.integer.behavior import (
    IntegerInvariantViolation,
    IntegerOverflow,
    OperationBehavior,
)
from src.core.integer.bits import INTEGER_BITS, bitsize, check_overflow

if TYPE_CHECKING:
    from src.core.contracts.snapshot import IntegerSnapshot

R = TypeVar("R")

_FORMAT_SPEC_RE = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?[+\- ]?z?#?0?(?P<width>\d+)?"
)


# =============================================================================
# TYPES
# =============================================================================


class _NaN(Enum):
    """Tag значения Not-a-Number."""

    NAN = "NaN"

    def __repr__(self) -> str:
        return "NaN"


NAN = _NaN.NAN

IntegerValue = Union[int, _NaN]


class Ordering(IntEnum):
    """Результат сравнения двух чисел."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _order(lhs: int, rhs: int) -> Ordering:
    if lhs < rhs:
        return Ordering.LESS
    if lhs > rhs:
        return Ordering.GREATER
    return Ordering.EQUAL


# =============================================================================
# INTEGER DATA
# =============================================================================


class IntegerData:
    """
    Ячейка целого числа VM (NaN или знаковое целое до 257 бит).

    Значение неизменяемо по соглашению: арифметика создаёт новые объекты.
    Мутируют только withdraw() и replace(), и только слот, которым владеет
    вызывающий.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        """
        Args:
            value: Целое значение (default: 0)

        Raises:
            TypeError: Если value не int
            IntegerOverflow: Если value не помещается в 257 бит
        """
        self._value: IntegerValue = _checked(value)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _raw(cls, value: IntegerValue) -> "IntegerData":
        obj = cls.__new__(cls)
        obj._value = value
        return obj

    @classmethod
    def new(cls) -> "IntegerData":
        """Новое значение (0). Синоним zero()."""
        return cls.zero()

    @classmethod
    def zero(cls) -> "IntegerData":
        return cls._raw(0)

    @classmethod
    def one(cls) -> "IntegerData":
        return cls._raw(1)

    @classmethod
    def minus_one(cls) -> "IntegerData":
        return cls._raw(-1)

    @classmethod
    def nan(cls) -> "IntegerData":
        return cls._raw(NAN)

    @classmethod
    def from_int(cls, value: int) -> "IntegerData":
        """
        Проверенное создание из результата вычисления.

        Raises:
            TypeError: Если value не int
            IntegerOverflow: Если bitsize(value) >= 258
        """
        return cls._raw(_checked(value))

    # -------------------------------------------------------------------------
    # Мутация слота
    # -------------------------------------------------------------------------

    def withdraw(self) -> "IntegerData":
        """Забирает текущее значение, слот сбрасывается в zero()."""
        taken = IntegerData._raw(self._value)
        self._value = 0
        return taken

    def replace(self, new_value: "IntegerData") -> None:
        """Безусловно заменяет значение слота; прежнее значение теряется."""
        self._value = new_value._value

    def copy(self) -> "IntegerData":
        return IntegerData._raw(self._value)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "IntegerData":
        return self.copy()

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        return self._value is NAN

    def is_neg(self) -> bool:
        """True если значение < 0. NaN не отрицателен."""
        if self._value is NAN:
            return False
        return self._value < 0

    def is_zero(self) -> bool:
        """True если значение == 0. NaN не ноль."""
        if self._value is NAN:
            return False
        return self._value == 0

    @property
    def magnitude(self) -> int:
        """
        Целое значение ячейки.

        Raises:
            IntegerInvariantViolation: Если значение NaN
        """
        return process_value(self, lambda value: value)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def cmp(
        self, behavior: Type[OperationBehavior], other: "IntegerData"
    ) -> Optional[Ordering]:
        """
        Сравнение с учётом политики операции.

        Args:
            behavior: Политика (Checked / Quiet)
            other: Второй операнд

        Returns:
            Ordering, или None если операнд NaN и политика Quiet

        Raises:
            NaNOperand: Если операнд NaN и политика Checked
        """
        if self._value is NAN or other._value is NAN:
            behavior.on_nan_parameter()
            return None
        return _order(self._value, other._value)

    def partial_cmp(self, other: "IntegerData") -> Optional[Ordering]:
        """Сравнение без политики: None если хотя бы один операнд NaN."""
        if self._value is NAN or other._value is NAN:
            return None
        return _order(self._value, other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegerData):
            return NotImplemented
        return self._value == other._value

    # Мутабельный слот (withdraw/replace): не хешируется
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Разрядность
    # -------------------------------------------------------------------------

    def fits_in(self, bits: int) -> bool:
        """True если знаковое значение помещается в bits бит."""
        return self.bitsize() <= bits

    def ufits_in(self, bits: int) -> bool:
        """True если значение неотрицательно и помещается в bits бит без знака."""
        return not self.is_neg() and self.ubitsize() <= bits

    def bitsize(self) -> int:
        """Минимум бит для знакового значения (дополнительный код)."""
        return process_value(self, bitsize)

    def ubitsize(self) -> int:
        """Минимум бит для беззнакового значения (bit_length модуля)."""
        return process_value(self, lambda value: value.bit_length())

    # -------------------------------------------------------------------------
    # Контракт stack dump
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> "IntegerSnapshot":
        from src.core.contracts.snapshot import IntegerSnapshot

        if self._value is NAN:
            return IntegerSnapshot(kind="NaN")
        return IntegerSnapshot(kind="Number", value=str(self._value))

    @classmethod
    def from_snapshot(cls, snapshot: "IntegerSnapshot") -> "IntegerData":
        if snapshot.kind == "NaN":
            return cls.nan()
        return cls.from_int(int(snapshot.value))

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return "NaN" if self._value is NAN else str(self._value)

    def __repr__(self) -> str:
        if self._value is NAN:
            return "IntegerData.nan()"
        return f"IntegerData({self._value})"

    def __format__(self, format_spec: str) -> str:
        # NaN форматируется как строка, чтобы ширина/выравнивание работали
        if self._value is NAN:
            return format("NaN", _str_spec(format_spec))
        return format(self._value, format_spec)


# =============================================================================
# HELPERS
# =============================================================================


def require_int(value: object) -> int:
    """
    Проверка типа сырого значения: только int (bool не допускается).

    Raises:
        TypeError: Если value не int или bool
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"IntegerData requires int, got {type(value).__name__}")
    return value


def _checked(value: int) -> int:
    require_int(value)
    if not check_overflow(value):
        raise IntegerOverflow(
            f"value of bitsize {bitsize(value)} does not fit in {INTEGER_BITS} bits"
        )
    return value


def _str_spec(format_spec: str) -> str:
    # Для "NaN" применимы только fill/align/width
    match = _FORMAT_SPEC_RE.match(format_spec)
    fill, align, width = match.group("fill", "align", "width")
    if not width:
        return ""
    if not align or align == "=":
        return f"{fill or ''}>{width}"
    return f"{fill or ''}{align}{width}"


def process_value(value: IntegerData, call_on_valid: Callable[[int], R]) -> R:
    """
    Применяет call_on_valid к целому значению.

    Raises:
        IntegerInvariantViolation: Если значение NaN
    """
    if value._value is NAN:
        raise IntegerInvariantViolation("IntegerData must be a valid number")
    return call_on_valid(value._value)
