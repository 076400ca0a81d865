"""
Исключения доменного слоя.
"""


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class UnknownCategoryError(DomainException):
    """Исключение: метка категории номера не распознана."""

    def __init__(self, label: str):
        super().__init__(f"Неизвестная категория номера: {label!r}")
        self.label = label


class InvalidCustomerNameError(DomainException):
    """Исключение: имя клиента пустое или содержит перевод строки."""

    pass


class MalformedRecordError(DomainException):
    """Исключение: строка файла бронирований не может быть разобрана."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"Некорректная запись ({reason}): {line!r}")
        self.line = line
        self.reason = reason
