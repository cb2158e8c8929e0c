"""
AppState — Модель состояния рендер-UI

Immutable Pydantic модель: плоская запись параметров viewport и итераций,
которую читает рендер-цикл tetration-фрактала.
Полная совместимость с JSON Schema (core/contracts/schema/app_state.json).

Действия UI (start/cancel render, toggle dark mode, update value) выражены
как immutable переходы: каждый возвращает новый валидированный экземпляр.
"""

from typing import Any

from pydantic import BaseModel, Field


# =============================================================================
# APP STATE MODEL
# =============================================================================


class AppState(BaseModel):
    """
    Снапшот состояния рендер-UI.

    Immutable модель (frozen=True). Содержит:
    - Центр viewport (x0, y0) и шаг сетки (eps, ratio_x, ratio_y)
    - Параметры итераций (n, max_iter, escape_radius, threshold)
    - UI флаги (dark mode, rendering, fast render, caching)

    Булевы флаги принимают camelCase алиасы (isDarkMode и т.д.).
    """

    # Viewport
    x0: float = Field(..., allow_inf_nan=False, description="Центр viewport по Re")
    y0: float = Field(..., allow_inf_nan=False, description="Центр viewport по Im")
    eps: float = Field(..., gt=0, allow_inf_nan=False, description="Шаг сетки")
    ratio_x: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Масштаб по горизонтали"
    )
    ratio_y: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Масштаб по вертикали"
    )

    # Итерации
    n: int = Field(..., ge=1, description="Разрешение сетки (точек на сторону)")
    max_iter: int = Field(..., ge=1, description="Максимум итераций на пиксель")
    escape_radius: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Радиус убегания (|z| > radius → divergence)",
    )
    threshold: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Порог раскраски"
    )

    # UI флаги
    is_dark_mode: bool = Field(..., alias="isDarkMode", description="Тёмная тема")
    is_rendering: bool = Field(
        ..., alias="isRendering", description="Идёт ли рендер"
    )
    fast_render: bool = Field(
        ..., alias="fastRender", description="Рендер через compiled backend"
    )
    use_caching: bool = Field(
        ..., alias="useCaching", description="Кэширование результатов рендера"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    # -------------------------------------------------------------------------
    # Immutable переходы
    # -------------------------------------------------------------------------

    def update_value(self, key: str, value: Any) -> "AppState":
        """
        Новый экземпляр с изменённым полем.

        Args:
            key: Имя поля (snake_case) или его camelCase алиас
            value: Новое значение (валидируется заново)

        Returns:
            Новый AppState

        Raises:
            KeyError: Если поле неизвестно
            pydantic.ValidationError: Если значение невалидно
        """
        field_name = self.resolve_field(key)
        data = self.model_dump()
        data[field_name] = value
        return type(self).model_validate(data)

    def toggle_dark_mode(self) -> "AppState":
        return self.update_value("is_dark_mode", not self.is_dark_mode)

    def start_render(self) -> "AppState":
        return self.update_value("is_rendering", True)

    def cancel_render(self) -> "AppState":
        return self.update_value("is_rendering", False)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_contract(self) -> dict[str, Any]:
        """Dict в форме контракта app_state.json (camelCase для флагов)."""
        return self.model_dump(by_alias=True)

    @classmethod
    def resolve_field(cls, key: str) -> str:
        """Имя поля по snake_case имени или алиасу."""
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        raise KeyError(f"Unknown AppState field: {key}")
