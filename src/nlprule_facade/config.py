"""
Модуль для работы с конфигурацией фасада

Функции:
- Загрузка nlprule_facade.yaml (+ профили: nlprule_facade.prod.yaml, nlprule_facade.test.yaml)
- ENV-переопределения (префикс NLPRULE_FACADE_, вложенность через __)
- Валидация значений
- Настройка логирования (только если явно включена в конфиге)
"""

import copy
import os
import sys
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "nlprule_facade.yaml"
ENV_PREFIX = "NLPRULE_FACADE_"


class Config:
    """Класс для работы с конфигурацией фасада"""

    def __init__(self, config_path: str = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем nlprule_facade.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / CONFIG_FILENAME

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / CONFIG_FILENAME

            self.config_path = config_path

        self.config_data = {}
        self.env_data = {}

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv(f'{ENV_PREFIX}ENV', '').lower().strip()
        root = self.config_path.parent if self.config_path else Path.cwd()
        if env == 'production':
            candidate = root / 'nlprule_facade.prod.yaml'
        elif env == 'testing':
            candidate = root / 'nlprule_facade.test.yaml'
        else:
            candidate = root / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            self.env_data = {
                'XDG_CACHE_HOME': os.getenv('XDG_CACHE_HOME'),
                'LOCALAPPDATA': os.getenv('LOCALAPPDATA'),
            }
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (NLPRULE_FACADE_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            if key == f'{ENV_PREFIX}ENV':
                continue
            tail = key[len(ENV_PREFIX):]
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            elif val.lower() in ('null', 'none'):
                parsed = None
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(f'{ENV_PREFIX}ENV'):
            logger.info(f"Активирован профиль: {os.getenv(f'{ENV_PREFIX}ENV')}")

    def _validate(self) -> None:
        """Проверяет значения, которые нельзя использовать как есть."""
        timeout = self.get('resources.timeout')
        if timeout is not None:
            try:
                if float(timeout) <= 0:
                    raise ValueError(timeout)
            except (TypeError, ValueError):
                logger.warning(f"Некорректный resources.timeout={timeout!r}, таймаут отключён")
                self._set_nested(self.config_data, 'resources.timeout', None)
        backend_type = str(self.get('engine.backend.type', 'pickle') or 'pickle').lower()
        self._set_nested(self.config_data, 'engine.backend.type', backend_type)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Настраивает корневой логгер, если logging.configure включён.

        Библиотека по умолчанию не трогает логирование приложения.
        Повторная настройка выполняется только при изменении параметров
        или при force=True.
        """
        if not self.is_logging_configuration_enabled() and not force:
            return

        root = logging.getLogger()
        level_name = str(self.get_logging_level()).upper()
        level = getattr(logging, level_name, logging.INFO)
        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_nlprule_facade_configured", False) and not force:
            if (
                getattr(root, "_nlprule_facade_level", None) == level_name and
                getattr(root, "_nlprule_facade_format", None) == desired_fmt and
                getattr(root, "_nlprule_facade_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except Exception as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        logging.basicConfig(level=level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_nlprule_facade_configured", True)
        setattr(root, "_nlprule_facade_level", level_name)
        setattr(root, "_nlprule_facade_format", desired_fmt)
        setattr(root, "_nlprule_facade_file", desired_file)

    def configure_logging(self) -> None:
        """Принудительно настраивает логирование по текущему конфигу."""
        self._configure_logging_if_needed(force=True)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return copy.deepcopy({
            'resources': {
                'base_url': "https://github.com/bminixhofer/nlprule/raw",
                # Таймаута нет: для ограниченной задержки передавайте файлы напрямую
                'timeout': None,
                'user_agent': "nlprule-facade",
            },
            'cache': {
                'enabled': True,
                # None: системная папка кэша пользователя
                'root_dir': None,
            },
            'engine': {
                'backend': {
                    'type': 'pickle',
                    'name': '',
                },
            },
            'logging': {
                'configure': False,
                'level': "INFO",
                'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/nlprule_facade.log",
            },
        })

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            keys = key.split('.')
            value = self.config_data

            for k in keys:
                value = value[k]

            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения, прочитанной при загрузке"""
        value = self.env_data.get(key)
        return default if value is None else value

    # --- Ресурсы ---
    def get_resources_base_url(self) -> str:
        """Базовый URL релизных артефактов"""
        return str(self.get('resources.base_url', "https://github.com/bminixhofer/nlprule/raw")).rstrip('/')

    def get_resources_timeout(self) -> Optional[float]:
        """Таймаут HTTP-запроса в секундах или None"""
        timeout = self.get('resources.timeout')
        return None if timeout is None else float(timeout)

    def get_resources_user_agent(self) -> str:
        return self.get('resources.user_agent', "nlprule-facade")

    # --- Кэш ---
    def is_cache_enabled(self) -> bool:
        return bool(self.get('cache.enabled', True))

    def get_cache_root_dir(self) -> Optional[Path]:
        """Корень кэша пользователя (без подпапки nlprule) или None, если его не определить"""
        if not self.is_cache_enabled():
            return None
        configured = self.get('cache.root_dir')
        if configured:
            return Path(os.path.expanduser(str(configured)))
        return self._default_cache_root()

    def _default_cache_root(self) -> Optional[Path]:
        try:
            if sys.platform == 'darwin':
                return Path.home() / 'Library' / 'Caches'
            if os.name == 'nt':
                local = self.get_env('LOCALAPPDATA')
                return Path(local) if local else None
            xdg = self.get_env('XDG_CACHE_HOME')
            if xdg and os.path.isabs(xdg):
                return Path(xdg)
            return Path.home() / '.cache'
        except (RuntimeError, KeyError) as e:
            logger.debug(f"Домашняя папка не определена, кэш отключён: {e}")
            return None

    # --- Движок ---
    def get_engine_backend_config(self) -> Dict[str, Any]:
        """Настройки бэкенда десериализации (тип/имя)."""
        return dict(self.get('engine.backend', {}) or {})

    # --- Логирование ---
    def is_logging_configuration_enabled(self) -> bool:
        return bool(self.get('logging.configure', False))

    def get_logging_level(self) -> str:
        return self.get('logging.level', "INFO")

    def get_logging_format(self) -> str:
        return self.get('logging.format', "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        return self.get('logging.log_file', "logs/nlprule_facade.log")


# Глобальный экземпляр конфигурации
config = Config()
