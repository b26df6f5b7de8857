"""
Фабрика для создания бэкенда десериализации по конфигурации.
"""

from __future__ import annotations

import importlib
from typing import Optional, Dict, Any

from ..config import config
from ..exceptions import ConfigurationError
from .base_model import BaseEngineBackend
from .pickle_backend import PickleBackend


class BackendFactory:
    """Создаёт бэкенды на основе конфигурации."""

    @staticmethod
    def create(backend_cfg: Dict[str, Any]) -> Optional[BaseEngineBackend]:
        """Создаёт бэкенд из словаря настроек.

        Ожидаемый формат:
        {
          "type": "pickle" | "import",
          "name": "package.module:Backend",  # только для type=import
        }
        """
        if not backend_cfg:
            return PickleBackend()
        backend_type = (backend_cfg.get("type") or "pickle").lower()
        name = backend_cfg.get("name") or ""
        if backend_type == "pickle":
            return PickleBackend()
        if backend_type == "import":
            return BackendFactory._import_backend(name)
        return None

    @staticmethod
    def _import_backend(name: str) -> BaseEngineBackend:
        module_name, _, attr = name.partition(":")
        if not module_name or not attr:
            raise ConfigurationError(
                f"engine.backend.name должен иметь вид 'package.module:Backend', получено {name!r}"
            )
        try:
            module = importlib.import_module(module_name)
            target = getattr(module, attr)
        except (ImportError, AttributeError) as e:
            raise ConfigurationError(f"Не удалось импортировать бэкенд {name!r}: {e}") from e
        backend = target() if isinstance(target, type) else target
        if not isinstance(backend, BaseEngineBackend):
            raise ConfigurationError(f"{name!r} не является BaseEngineBackend")
        return backend

    @staticmethod
    def create_or_fail(backend_cfg: Dict[str, Any]) -> BaseEngineBackend:
        """Создаёт бэкенд или выбрасывает ошибку (Fail Fast).

        Raises:
            ConfigurationError: если тип бэкенда неизвестен или имя не импортируется
        """
        backend = BackendFactory.create(backend_cfg)
        if backend is None:
            raise ConfigurationError(
                f"Некорректная конфигурация бэкенда: неизвестный тип {backend_cfg.get('type')!r}"
            )
        return backend

    @staticmethod
    def resolve(backend: Optional[BaseEngineBackend] = None) -> BaseEngineBackend:
        """Возвращает переданный бэкенд или создаёт бэкенд из config."""
        if backend is not None:
            return backend
        return BackendFactory.create_or_fail(config.get_engine_backend_config())
