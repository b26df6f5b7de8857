"""
Модуль для получения бинарных артефактов движка

Предоставляет функциональность для:
- Построения пути кэша и URL артефакта по (код языка, имя, версия)
- Чтения артефакта из кэша пользователя
- Загрузки и распаковки .gz артефакта из релизного хранилища
- Атомарной записи распакованных данных в кэш
"""

import gzip
import io
import os
import shutil
import tempfile
import zlib
from pathlib import Path
from typing import BinaryIO, Optional, Union

import requests
import logging

from .config import config
from .exceptions import ConfigurationError, ResourceCorrupt, ResourceUnavailable
from .version import __version__

logger = logging.getLogger(__name__)

CACHE_DIR_NAME = "nlprule"
TOKENIZER_ARTIFACT = "tokenizer.bin.gz"
RULES_ARTIFACT = "rules.bin.gz"


class ArtifactResolver:
    """Класс для получения версионированных артефактов с кэшированием на диске"""

    def __init__(self,
                 cache_root: Optional[Union[str, Path]] = None,
                 base_url: Optional[str] = None,
                 version: str = __version__,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None,
                 use_cache: Optional[bool] = None):
        """
        Инициализация резолвера

        Args:
            cache_root: Корень кэша пользователя (по умолчанию из config)
            base_url: Базовый URL хранилища (по умолчанию из config)
            version: Версия релиза, задающая путь кэша и URL
            session: Сессия requests (создаётся при первом запросе, если не передана)
            timeout: Таймаут HTTP-запроса в секундах (по умолчанию без таймаута)
            use_cache: Включить кэш (по умолчанию из config)
        """
        if use_cache is None:
            use_cache = config.is_cache_enabled()
        if not use_cache:
            self.cache_root = None
        elif cache_root is not None:
            self.cache_root = Path(cache_root)
        else:
            self.cache_root = config.get_cache_root_dir()
        self.base_url = (base_url or config.get_resources_base_url()).rstrip('/')
        self.version = version
        self.timeout = timeout if timeout is not None else config.get_resources_timeout()
        self._session = session

        # Статистика обращений
        self.stats = {
            'cache_hits': 0,
            'downloads': 0,
            'cache_write_failures': 0,
        }

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                'User-Agent': f"{config.get_resources_user_agent()}/{self.version}"
            })
        return self._session

    @staticmethod
    def _strip_gz(name: str) -> str:
        if not name.endswith('.gz'):
            raise ConfigurationError(f"Имя ресурса должно оканчиваться на .gz: {name!r}")
        return name[:-len('.gz')]

    def version_dir(self) -> Optional[Path]:
        """Папка кэша текущей версии или None, если кэш недоступен"""
        if self.cache_root is None:
            return None
        return self.cache_root / CACHE_DIR_NAME / self.version

    def cache_path(self, code: str, name: str) -> Optional[Path]:
        """
        Путь к распакованному артефакту в кэше

        Args:
            code: Код языка (например, 'en')
            name: Имя артефакта с суффиксом .gz

        Returns:
            <root>/nlprule/<version>/<code>/<name без .gz> или None
        """
        stripped = self._strip_gz(name)
        version_dir = self.version_dir()
        if version_dir is None:
            return None
        return version_dir / code / stripped

    def url_for(self, code: str, name: str) -> str:
        """URL артефакта в релизном хранилище"""
        return f"{self.base_url}/{self.version}/storage/{code}/{name}"

    def fetch(self, code: str, name: str) -> BinaryIO:
        """
        Возвращает распакованные байты артефакта

        Args:
            code: Код языка
            name: Имя артефакта с суффиксом .gz

        Returns:
            Поток для чтения распакованных данных

        Raises:
            ConfigurationError: имя без суффикса .gz
            ResourceUnavailable: сетевая ошибка или HTTP-ошибка
            ResourceCorrupt: данные не распаковываются
        """
        path = self.cache_path(code, name)

        # Если файл читается, данные уже в кэше
        if path is not None:
            try:
                data = path.read_bytes()
            except OSError:
                data = None
            if data is not None:
                self.stats['cache_hits'] += 1
                logger.debug(f"Артефакт {code}/{name} взят из кэша: {path}")
                return io.BytesIO(data)

        payload = self._download(self.url_for(code, name))

        try:
            data = gzip.decompress(payload)
        except (OSError, EOFError, zlib.error) as e:
            raise ResourceCorrupt(f"Не удалось распаковать {code}/{name}: {e}") from e

        if path is not None:
            self._write_cache(path, data)

        return io.BytesIO(data)

    def _download(self, url: str) -> bytes:
        try:
            logger.info(f"Загружаю артефакт: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.content
        except requests.exceptions.RequestException as e:
            raise ResourceUnavailable(f"Ошибка при загрузке {url}: {e}") from e
        self.stats['downloads'] += 1
        logger.info(f"Артефакт загружен: {url} ({len(payload)} байт)")
        return payload

    def _write_cache(self, path: Path, data: bytes) -> None:
        """Атомарно записывает данные в кэш. Ошибки только логируются."""
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
            os.replace(tmp_name, path)
            tmp_name = None
            logger.info(f"Артефакт сохранён в кэш: {path}")
        except OSError as e:
            self.stats['cache_write_failures'] += 1
            logger.warning(f"Не удалось записать кэш {path}: {e}")
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    def clear_cache(self, code: Optional[str] = None) -> bool:
        """
        Удаляет кэш текущей версии (или только одного языка)

        Returns:
            True если что-то было удалено
        """
        version_dir = self.version_dir()
        if version_dir is None:
            return False
        target = version_dir / code if code else version_dir
        if not target.exists():
            return False
        shutil.rmtree(target)
        logger.info(f"Кэш удалён: {target}")
        return True


def fetch(code: str, name: str) -> BinaryIO:
    """Получает артефакт через резолвер с настройками из config"""
    return ArtifactResolver().fetch(code, name)
