"""
Coefficient — Коэффициент цепной дроби

Immutable Pydantic модель одного члена a_i:
- magnitude: абсолютное значение
- is_negative: флаг знака
- is_periodic_marker: флаг начала периодической части

Равенство сравнивает только signed_value и флаг периода.
"""

from pydantic import BaseModel, Field

from contfrac.core.math.numerical_safeguards import INT64_MAX


class Coefficient(BaseModel):
    """
    Коэффициент цепной дроби.

    Immutable модель (frozen=True): изменения последовательности
    всегда создают новые экземпляры.
    """

    magnitude: int = Field(..., ge=0, le=INT64_MAX + 1, description="Абсолютное значение")
    is_negative: bool = Field(default=False, description="Флаг отрицательности")
    is_periodic_marker: bool = Field(default=False, description="Флаг начала периода")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, value: int, periodic: bool = False) -> "Coefficient":
        """
        Создание коэффициента из знакового целого.

        Args:
            value: Знаковое значение коэффициента
            periodic: Является ли коэффициент началом периода

        Returns:
            Новый Coefficient
        """
        return cls(magnitude=abs(value), is_negative=value < 0, is_periodic_marker=periodic)

    @property
    def signed_value(self) -> int:
        """Знаковое значение: -magnitude если is_negative, иначе magnitude."""
        return -self.magnitude if self.is_negative else self.magnitude

    def as_plain(self) -> "Coefficient":
        """Тот же коэффициент без флага периода."""
        if not self.is_periodic_marker:
            return self
        return Coefficient.of(self.signed_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coefficient):
            return NotImplemented
        return (
            self.signed_value == other.signed_value
            and self.is_periodic_marker == other.is_periodic_marker
        )

    def __hash__(self) -> int:
        return hash((self.signed_value, self.is_periodic_marker))
