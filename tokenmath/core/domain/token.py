"""
Token — Идентичность токена

TokenLike — минимальная способность, на которую опираются TokenAmount и Price:
decimals, symbol и equals(other). Любой объект с этими атрибутами подходит.

Token — стандартная immutable Pydantic реализация TokenLike.
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class TokenLike(Protocol):
    """Способность токена: точность, символ и сравнение идентичности."""

    @property
    def decimals(self) -> int: ...

    @property
    def symbol(self) -> str: ...

    def equals(self, other: "TokenLike") -> bool: ...


class Token(BaseModel):
    """
    Модель токена.

    Immutable модель (frozen=True). Два токена считаются одним и тем же,
    если совпадают symbol, decimals и address.
    """

    symbol: str = Field(..., min_length=1, description="Тикер (например, 'BTC')")
    decimals: int = Field(..., ge=0, description="Количество знаков после запятой")
    name: str | None = Field(default=None, description="Человекочитаемое имя")
    address: str | None = Field(
        default=None, min_length=1, description="Адрес mint/контракта, если известен"
    )

    model_config = {"frozen": True}

    def equals(self, other: TokenLike) -> bool:
        """Проверка идентичности токена."""
        if not isinstance(other, Token):
            return False
        return (
            self.symbol == other.symbol
            and self.decimals == other.decimals
            and self.address == other.address
        )

    def __str__(self) -> str:
        return f"{self.symbol} ({self.decimals} decimals)"
