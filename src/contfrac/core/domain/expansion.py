"""
PeriodicExpansion — Структурное представление цепной дроби

Конечный префикс + необязательный непустой период:
    [prefix...; (period...)]

Единственность маркера периода гарантируется самой формой модели,
а не сканированием последовательности.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from contfrac.core.domain.coefficient import Coefficient


class PeriodicExpansion(BaseModel):
    """
    Immutable разбиение цепной дроби на префикс и период.

    - prefix: коэффициенты до начала периода (может быть пустым, если период
      начинается с a0)
    - period: повторяющийся хвост или None для конечной дроби
    """

    prefix: tuple[int, ...] = Field(default=(), description="Непериодическая часть")
    period: Optional[tuple[int, ...]] = Field(default=None, description="Периодическая часть")

    model_config = {"frozen": True}

    @field_validator("period")
    @classmethod
    def validate_period_not_empty(cls, v: Optional[tuple[int, ...]]) -> Optional[tuple[int, ...]]:
        """Пустой период не допускается: конечная дробь задаётся period=None."""
        if v is not None and len(v) == 0:
            raise ValueError("period must be non-empty or None")
        return v

    @property
    def is_periodic(self) -> bool:
        return self.period is not None

    @classmethod
    def from_coefficients(cls, coefficients: list[Coefficient]) -> "PeriodicExpansion":
        """
        Разбиение плоской последовательности по первому маркеру периода.

        Args:
            coefficients: Последовательность коэффициентов

        Returns:
            PeriodicExpansion
        """
        values = [c.signed_value for c in coefficients]
        for index, coefficient in enumerate(coefficients):
            if coefficient.is_periodic_marker:
                return cls(prefix=tuple(values[:index]), period=tuple(values[index:]))
        return cls(prefix=tuple(values), period=None)

    def to_coefficients(self) -> list[Coefficient]:
        """Плоская последовательность с маркером на первом элементе периода."""
        coefficients = [Coefficient.of(v) for v in self.prefix]
        if self.period is not None:
            coefficients.append(Coefficient.of(self.period[0], periodic=True))
            coefficients.extend(Coefficient.of(v) for v in self.period[1:])
        return coefficients
