# ⚙️ skuscout/config/config_service.py
"""
⚙️ config_service.py: Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Збирає конфігурацію з пакетного config.yaml, користувацького YAML та змінних середовища (.env).
- Надає єдиний метод .get() з крапковими ключами та опційним приведенням типу.
- Після завантаження дані не змінюються (читання з кількох місць безпечне).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                                     # 📦 YAML-парсинг
from dotenv import load_dotenv                                  # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import copy                                                     # 🧬 Глибокі копії дефолтів
import logging                                                  # 🧾 Логування
import os                                                       # 📁 Доступ до змінних середовища
from pathlib import Path                                        # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Mapping, Optional, Union

# 🧩 Внутрішні модулі проєкту
from skuscout.shared.errors import ConfigError                  # ⚙️ Некоректний YAML
from skuscout.shared.utils.logger import LOG_NAME               # 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH: Path = Path(__file__).parent / "config.yaml"   # 📘 Пакетні дефолти
CONFIG_PATH_ENV: str = "SKUSCOUT_CONFIG"                            # 🌱 Шлях до користувацького YAML

_BOOL_TRUE = {"1", "true", "yes", "on", "y", "t"}
_BOOL_FALSE = {"0", "false", "no", "off", "n", "f"}

# 🌱 ENV → крапковий ключ конфігурації
ENV_OVERRIDES: Dict[str, str] = {
    "SKUSCOUT_HEADLESS": "webdriver.headless",
    "SKUSCOUT_USER_AGENT": "webdriver.user_agent",
    "SKUSCOUT_ENABLE_STEALTH": "webdriver.enable_stealth",
    "SKUSCOUT_LOAD_TIMEOUT_MS": "probe.load_timeout_ms",
    "SKUSCOUT_CRITICAL_TIMEOUT_MS": "probe.critical_timeout_ms",
    "SKUSCOUT_LOG_LEVEL": "logging.level",
    "SKUSCOUT_LOG_FILE": "logging.file",
    "SKUSCOUT_METRICS_PORT": "metrics.port",
}


def _parse_bool(value: Any) -> bool:
    """🔀 Перетворює значення у bool; невідомі рядки → ValueError."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    cleaned = str(value).strip().lower()
    if cleaned in _BOOL_TRUE:
        return True
    if cleaned in _BOOL_FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх конфігураційних параметрів застосунку.

    Пріоритет джерел (пізніше перекриває раніше):
    пакетний config.yaml → користувацький YAML → ENV (`SKUSCOUT_*`) → `overrides`.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        *,
        overrides: Optional[Mapping[str, Any]] = None,
        load_env: bool = True,
        defaults_path: Optional[Path] = DEFAULT_CONFIG_PATH,
    ) -> None:
        self._config: Dict[str, Any] = {}                       # 📦 Обʼєднана конфігурація

        if defaults_path is not None:                           # --- 1. Пакетні дефолти ---
            self._deep_update(self._config, self._read_yaml(Path(defaults_path), required=True))

        if load_env:
            load_dotenv()                                       # 🔐 Змінні з .env у os.environ

        user_path = config_path or (os.getenv(CONFIG_PATH_ENV) if load_env else None)
        if user_path:                                           # --- 2. Користувацький YAML ---
            self._deep_update(self._config, self._read_yaml(Path(user_path), required=True))
            logger.info("📘 Підключено конфіг %s", user_path)

        if load_env:                                            # --- 3. ENV-перекриття ---
            env_vars = {
                key: os.environ[name]
                for name, key in ENV_OVERRIDES.items()
                if os.environ.get(name) not in (None, "")
            }
            self._deep_update(self._config, self._unflatten_dict(env_vars))

        if overrides:                                           # --- 4. Явні перекриття ---
            self._deep_update(self._config, self._unflatten_dict(dict(overrides)))

        logger.debug("✅ Конфігурацію завантажено: %s", sorted(self._config))

    # ================================
    # 🏭 ФАБРИКИ
    # ================================
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConfigService":
        """Сервіс лише з переданого словника, без файлів і ENV (тести, вбудовування)."""
        service = cls(defaults_path=None, load_env=False)
        service._deep_update(service._config, copy.deepcopy(dict(data)))
        return service

    # ================================
    # 🔑 ДОСТУП ДО ЗНАЧЕНЬ
    # ================================
    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'probe.load_timeout_ms').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
            cast (Callable | None): Приведення типу; помилка приведення → default.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        if value is None:
            return default
        if cast is None:
            return value
        try:
            return _parse_bool(value) if cast is bool else cast(value)
        except (TypeError, ValueError):
            logger.warning("⚠️ Некоректне значення %s=%r → fallback=%r", key, value, default)
            return default

    def section(self, key: str) -> Dict[str, Any]:
        """Повертає копію вкладеного розділу (порожній dict, якщо його немає)."""
        node = self.get(key, {})
        return copy.deepcopy(node) if isinstance(node, dict) else {}

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _read_yaml(path: Path, *, required: bool) -> Dict[str, Any]:
        """📘 Читає YAML-файл у словник."""
        try:
            with open(path, "r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except FileNotFoundError:
            if required:
                raise ConfigError("Файл конфігурації не знайдено", details=str(path))
            return {}
        except yaml.YAMLError as exc:
            raise ConfigError("Некоректний YAML", details=f"{path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError("Корінь конфігурації має бути словником", details=str(path))
        return data

    @staticmethod
    def _unflatten_dict(d: Mapping[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'probe.load_timeout_ms' → {'probe': {'load_timeout_ms': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Mapping[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словники; списки та скаляри перезаписуються."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)
            else:
                source[key] = value


__all__ = ["ConfigService", "DEFAULT_CONFIG_PATH", "ENV_OVERRIDES"]
