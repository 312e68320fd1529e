# ⚙️ checkout_upsell/config/config_service.py
"""
⚙️ ConfigService: налаштування Storefront-зʼєднання, upsell-логіки та логування.

🔹 Джерела (наступне перекриває попереднє): `config.yaml` → `config.json` → змінні `.env`.
🔹 Доступ за ключем із крапками: `get("upsell.batch_size")`.
🔹 Один екземпляр на процес; `reset()` змушує перечитати джерела.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import os                                   # 📁 Доступ до змінних середовища
import json                                 # 📄 Робота з JSON-файлами
import logging                              # 🧾 Логування
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Optional


logger = logging.getLogger("checkout_upsell.config")

_CONFIG_DIR = Path(__file__).parent


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів віджета.
    Конфігурація зчитується лише один раз на процес.
    """

    _instance = None                          # 🧩 Singleton-екземпляр
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = {}
            cls._instance._load_all_configs()
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        else:
            logger.debug("📦 Використовується існуючий екземпляр ConfigService")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """🧹 Скидає singleton (наступний виклик перечитає всі джерела)."""
        cls._instance = None

    def _load_all_configs(self):
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (кожне наступне перекриває попереднє): config.yaml → config.json → .env
        """

        # --- 1. YAML-файл (дефолти) ---
        self._load_file(_CONFIG_DIR / "config.yaml", yaml.safe_load, (yaml.YAMLError,))

        # --- 2. JSON-файл (опційний) ---
        self._load_file(_CONFIG_DIR / "config.json", json.load, (json.JSONDecodeError,))

        # --- 3. .env змінні (секрети та endpoint хоста) ---
        load_dotenv()
        env_vars = {
            "storefront.api_url": os.getenv("STOREFRONT_API_URL"),
            "storefront.access_token": os.getenv("STOREFRONT_ACCESS_TOKEN"),
        }
        env_vars = {key: value for key, value in env_vars.items() if value}  # 🚫 Порожні змінні не перекривають дефолти
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.info("✅ Конфігурацію успішно завантажено.")
        logger.debug("🔍 Обʼєднаний словник конфігурації: %s", self._config)

    def _load_file(self, path: Path, loader: Callable[[Any], Any], errors: tuple) -> None:
        """📄 Зчитує один файл конфігу; відсутній або битий файл лише логується."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = loader(f)
        except FileNotFoundError:
            logger.debug("ℹ️ %s відсутній, пропускаємо", path.name)
            return
        except errors as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", path.name, e)
            return
        if isinstance(data, dict):
            self._deep_update(self._config, data)
        else:
            logger.warning("⚠️ %s не містить словника верхнього рівня", path.name)

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'upsell.batch_size').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                logger.debug("❓ Ключ '%s' не знайдено, повертаємо значення за замовчуванням", key)
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """✏️ Перевизначає значення у пам'яті (тести, ручне налаштування хоста)."""
        self._deep_update(self._config, self._unflatten_dict({key: value}))

    def section(self, key: str) -> Optional[Dict[str, Any]]:
        """📚 Повертає копію вкладеного розділу або None."""
        node = self.get(key)
        return dict(node) if isinstance(node, dict) else None

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================

    def _unflatten_dict(self, d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'storefront.api_url' → {'storefront': {'api_url': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict, overrides: Dict):
        """🔁 Рекурсивно обʼєднує два словники."""
        for key, value in overrides.items():
            if (
                isinstance(value, dict) and
                key in source and
                isinstance(source[key], dict)
            ):
                self._deep_update(source[key], value)
            else:
                source[key] = value
