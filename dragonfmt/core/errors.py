"""
Errors — таксономия ошибок конвертера

Все ошибки сообщаются вызывающему коду немедленно: без частичных результатов,
без молчаливой коэрции и без retry (все операции чистые и детерминированные,
повтор даст ту же ошибку).

NaN/Inf на входе рендереров ошибкой НЕ являются — они дают sentinel-строки.
"""


class ConversionError(Exception):
    """Базовый класс всех ошибок dragonfmt."""

    pass


class InvalidFormat(ConversionError, ValueError):
    """
    Некорректная строка на входе BigInt.from_binary_string / from_decimal_string.

    Допустимый формат: необязательный знак '+'/'-' и одна или более цифр
    соответствующего основания.
    """

    pass


class InvalidArgument(ConversionError, ValueError):
    """
    Некорректный аргумент: не-finite число там, где нужно конечное,
    не-integer там, где нужен целый индекс, значение вне допустимого диапазона.
    """

    pass


class DivisionByZero(ConversionError, ZeroDivisionError):
    """
    Деление BigInt на ноль.

    Фатальная ошибка (возникает только при misuse): внутренние делители
    алгоритмов всегда ненулевые.
    """

    pass


class ContractViolation(ConversionError, ValueError):
    """
    Payload интерфейса не соответствует своему JSON Schema контракту.

    Attributes:
        contract: имя контракта ('double_bits', 'digit_sequence')
        violations: все нарушения в виде 'путь: сообщение'
    """

    def __init__(self, contract: str, violations: list[str]):
        self.contract = contract
        self.violations = tuple(violations)
        super().__init__(f"{contract} contract violated: " + "; ".join(violations))
