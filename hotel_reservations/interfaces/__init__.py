"""
Внешние интерфейсы: консольное меню и точка входа.
"""
