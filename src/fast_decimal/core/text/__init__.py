"""
Текстовый слой: tokenizer, упаковка цифр, parser и formatter.

Модули импортируются напрямую (fast_decimal.core.text.parser и т.д.):
formatter используется моделью Decimal, parser строит Decimal.
"""
