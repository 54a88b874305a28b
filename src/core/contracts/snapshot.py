"""
IntegerSnapshot — модель значения ячейки для stack dump

Immutable Pydantic модель, совместимая с JSON Schema
(src/core/contracts/schema/integer_value.json).

Значение хранится десятичной строкой: 257-битные числа не помещаются
в JSON number без потери точности.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.integer.bits import check_overflow


class IntegerKind(str, Enum):
    """Вид значения ячейки."""

    NAN = "NaN"
    NUMBER = "Number"


class IntegerSnapshot(BaseModel):
    """
    Снапшот IntegerData.

    - kind=NaN: value отсутствует
    - kind=Number: value — десятичная строка, bitsize <= 257
    """

    kind: IntegerKind = Field(..., description="NaN или Number")
    value: Optional[str] = Field(
        None, pattern=r"^-?(0|[1-9][0-9]*)$", description="Десятичное значение"
    )

    model_config = {"frozen": True, "use_enum_values": True}

    @model_validator(mode="after")
    def _check_value(self) -> "IntegerSnapshot":
        if self.kind == IntegerKind.NAN:
            if self.value is not None:
                raise ValueError("NaN snapshot must not carry a value")
            return self

        if self.value is None:
            raise ValueError("Number snapshot requires a value")
        if not check_overflow(int(self.value)):
            raise ValueError(f"value does not fit in 257 bits: {self.value}")
        return self
