import json
import sys
from pathlib import Path
from typing import Dict, Optional

DEFAULT_LOCALE = "en-US"


class MessageCatalog:
    """
    CLI messages loaded from locales/<locale>.json.
    Lookups fall back to the default locale, then to the key itself.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(MessageCatalog, cls).__new__(cls)
            cls._instance._init()
        return cls._instance

    def _init(self) -> None:
        self.locale = DEFAULT_LOCALE
        self.locales_dir = Path(__file__).parent.parent / "locales"
        self.strings: Dict[str, Dict[str, str]] = {}
        for file in sorted(self.locales_dir.glob("*.json")):
            try:
                self.strings[file.stem] = json.loads(file.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                print(f"Failed to load locale {file}: {e}", file=sys.stderr)

    def match_locale(self, name: str) -> Optional[str]:
        """Find a loaded locale for `name`, ignoring case and '_' vs '-'."""
        wanted = name.replace("_", "-").lower()
        for locale in self.strings:
            if locale.lower() == wanted:
                return locale
        return None

    def set_locale(self, locale: str) -> None:
        self.locale = self.match_locale(locale) or DEFAULT_LOCALE

    def get_available_locales(self) -> list[str]:
        return sorted(self.strings.keys())

    def t(self, key: str, **fields) -> str:
        """Translate `key` and fill in any `{placeholders}` from `fields`."""
        for locale in (self.locale, DEFAULT_LOCALE):
            text = self.strings.get(locale, {}).get(key)
            if text is not None:
                return text.format(**fields) if fields else text
        return key


i18n = MessageCatalog()
