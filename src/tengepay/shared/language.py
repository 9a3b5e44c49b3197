# src/tengepay/shared/language.py
"""
Language Management - Multi-language Support

This module provides language selection and translation of every message
the program prints. English and Russian are supported; the preference lives
in memory only and starts from settings.default_language.

Files that USE this module:
- tengepay.adapters.formatting.formatter (uses translate for message formatting)

Files that this module USES:
- tengepay.config (default language)
"""
import logging
from typing import Dict, Any, Optional

from tengepay.config import settings

logger = logging.getLogger(__name__)

# Language constants
LANG_ENGLISH = "en"
LANG_RUSSIAN = "ru"


# Translation dictionaries
TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_ENGLISH: {
        "menu_header": "=== CHOOSE A PAYMENT METHOD ===",
        "menu_card": "1 - Bank card",
        "menu_wallet": "2 - E-wallet (email)",
        "menu_crypto": "3 - Cryptocurrency",
        "prompt_card": "Enter card number: ",
        "prompt_email": "Enter wallet email: ",
        "prompt_wallet": "Enter crypto wallet address: ",
        "prompt_amount": "Enter payment amount: ",
        "invalid_choice": "Invalid choice!",
        "paid_card": "Paid {amount} tenge by bank card: {identifier}",
        "paid_wallet": "Paid {amount} tenge via e-wallet: {identifier}",
        "paid_crypto": "Paid {amount} tenge in cryptocurrency: {identifier}",
        "no_method": "No payment method selected!",
        "observer_demo_header": "OBSERVER DEMO",
        "new_rate": "New USD rate: {rate}",
        "bank_update": "Bank received an update. New rate: {rate}",
        "investor_sell": "Investor: The rate is high, time to sell!",
        "investor_buy": "Investor: The rate is low, time to buy!",
        "office_update": "Exchange office updated its board. USD = {rate}",
        "observer_removed": "Removed the bank from subscribers.",
    },
    LANG_RUSSIAN: {
        "menu_header": "=== ВЫБЕРИТЕ СПОСОБ ОПЛАТЫ ===",
        "menu_card": "1 - Банковская карта",
        "menu_wallet": "2 - Электронный кошелёк (email)",
        "menu_crypto": "3 - Криптовалюта",
        "prompt_card": "Введите номер карты: ",
        "prompt_email": "Введите email кошелька: ",
        "prompt_wallet": "Введите адрес криптокошелька: ",
        "prompt_amount": "Введите сумму оплаты: ",
        "invalid_choice": "Неверный выбор!",
        "paid_card": "Оплата {amount} тенге банковской картой: {identifier}",
        "paid_wallet": "Оплата {amount} тенге через электронный кошелёк: {identifier}",
        "paid_crypto": "Оплата {amount} тенге криптовалютой: {identifier}",
        "no_method": "Стратегия оплаты не выбрана!",
        "observer_demo_header": "ДЕМОНСТРАЦИЯ НАБЛЮДАТЕЛЯ",
        "new_rate": "Новый курс USD: {rate}",
        "bank_update": "Банк получил обновление. Новый курс: {rate}",
        "investor_sell": "Инвестор: Курс высокий, пора продавать!",
        "investor_buy": "Инвестор: Курс низкий, можно покупать!",
        "office_update": "Обменный пункт обновил табло. USD = {rate}",
        "observer_removed": "Удалили банк из подписчиков.",
    },
}


class LanguageManager:
    """Keeps the current language and translates message keys."""

    def __init__(self, language: Optional[str] = None):
        """
        Initialize language manager.

        Args:
            language: Initial language code; defaults to settings.default_language
        """
        self._current_language: str = language or settings.default_language
        if self._current_language not in TRANSLATIONS:
            logger.warning("Unsupported language %s, falling back to English", self._current_language)
            self._current_language = LANG_ENGLISH

    def get_language(self) -> str:
        """
        Get current language.

        Returns:
            Current language code ('en' or 'ru')
        """
        return self._current_language

    def set_language(self, lang: str) -> bool:
        """
        Set language preference.

        Args:
            lang: Language code ('en' or 'ru')

        Returns:
            True if language was set successfully, False if invalid
        """
        if lang not in TRANSLATIONS:
            logger.warning("Invalid language code: %s", lang)
            return False

        old_lang = self._current_language
        self._current_language = lang
        logger.info("Language changed from %s to %s", old_lang, lang)
        return True

    def translate(self, key: str, **kwargs: Any) -> str:
        """
        Translate a message key with optional parameters.

        Args:
            key: Translation key
            **kwargs: Parameters to format into translation

        Returns:
            Translated and formatted string, or key if translation not found
        """
        lang_dict = TRANSLATIONS.get(self._current_language, TRANSLATIONS[LANG_ENGLISH])
        template = lang_dict.get(key)
        if template is None:
            logger.warning("No translation for key '%s' (lang=%s)", key, self._current_language)
            return key

        try:
            return template.format(**kwargs)
        except KeyError as e:
            logger.warning("Missing parameter in translation '%s': %s", key, e)
            return template


# Global language manager instance
language_manager = LanguageManager()


def get_language() -> str:
    """Get current language."""
    return language_manager.get_language()


def set_language(lang: str) -> bool:
    """Set language."""
    return language_manager.set_language(lang)


def translate(key: str, **kwargs: Any) -> str:
    """Translate a message key."""
    return language_manager.translate(key, **kwargs)
