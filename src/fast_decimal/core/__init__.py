"""
Core: digit-group кодировка, модель значения, парсер, сравнение и вывод.

Модули не зависят от внешних систем и не имеют изменяемого состояния.
"""
