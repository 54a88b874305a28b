"""
Bit-width & Overflow — примитивы разрядности

Модуль отвечает на вопрос "помещается ли значение в ячейку VM":
- bitsize: минимальное число бит в дополнительном коде (two's complement)
- check_overflow: единственный источник истины для границы 257 бит
- twos_complement: in-place отрицание little-endian последовательности слов

ПРАВИЛА bitsize:
    0        → 1
    -1       → 1
    v > 0    → bit_length(v) + 1          (место под знаковый бит)
    v < 0, |v| = 2^k → bit_length(|v|)    (знаковый бит не нужен)
    v < 0    → bit_length(|v|) + 1

int.bit_length() корректен для дополнительного кода только у
неотрицательных чисел и отрицательных степеней двойки, отсюда правила выше.
"""

from typing import Final, MutableSequence

# =============================================================================
# РАЗРЯДНОСТЬ ЯЧЕЙКИ VM
# =============================================================================

# 256 бит модуля + знак
INTEGER_BITS: Final[int] = 257

# bitsize >= OVERFLOW_BITSIZE_LIMIT → переполнение
OVERFLOW_BITSIZE_LIMIT: Final[int] = INTEGER_BITS + 1

# Ширина слова для twos_complement (по умолчанию)
DIGIT_BITS: Final[int] = 32


# =============================================================================
# BITSIZE / OVERFLOW
# =============================================================================


def bitsize(value: int) -> int:
    """
    Минимальное число бит для представления value в дополнительном коде.

    Examples:
        >>> bitsize(0), bitsize(-1), bitsize(1), bitsize(-2), bitsize(3)
        (1, 1, 2, 2, 3)
        >>> bitsize(-3)
        3
    """
    if value == 0 or value == -1:
        return 1

    res = value.bit_length()
    if value > 0:
        return res + 1

    magnitude = -value
    if magnitude & (magnitude - 1) == 0:
        return res
    return res + 1


def check_overflow(value: int) -> bool:
    """
    True если value помещается в ячейку VM (bitsize < 258), иначе False.

    Используется всеми post-processor'ами фреймворка операций.
    """
    return bitsize(value) < OVERFLOW_BITSIZE_LIMIT


# =============================================================================
# TWO'S COMPLEMENT
# =============================================================================


def twos_complement(digits: MutableSequence[int], digit_bits: int = DIGIT_BITS) -> None:
    """
    In-place дополнительный код для little-endian последовательности слов.

    Каждое слово инвертируется, затем прибавляется 1 с переносом, начиная
    с младшего слова. Перенос прекращается, как только слово не обнулилось.
    Границу 257 бит не проверяет: это делает вызывающий модуль.

    Args:
        digits: Изменяемая последовательность слов (младшее слово первое)
        digit_bits: Ширина слова в битах (default: DIGIT_BITS)

    Raises:
        ValueError: Если digit_bits <= 0 или слово вне [0, 2**digit_bits)

    Examples:
        >>> words = [1, 0]
        >>> twos_complement(words)
        >>> [hex(w) for w in words]
        ['0xffffffff', '0xffffffff']
    """
    if digit_bits <= 0:
        raise ValueError(f"digit_bits must be positive, got {digit_bits}")

    mask = (1 << digit_bits) - 1
    for i, digit in enumerate(digits):
        if digit < 0 or digit > mask:
            raise ValueError(f"digit {i} out of {digit_bits}-bit range: {digit}")

    # Валидация до мутации: при ошибке последовательность не меняется
    carry = True
    for i, digit in enumerate(digits):
        digit = ~digit & mask
        if carry:
            digit = (digit + 1) & mask
            carry = digit == 0
        digits[i] = digit
