"""
Core: integer core, десятичное представление, контекст точности и операторы.

Модуль не зависит от внешних систем и не выполняет I/O.
"""
