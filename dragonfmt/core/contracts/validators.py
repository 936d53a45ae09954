"""
Payload Contracts — JSON Schema контракты интерфейса конвертера

decompose() и shortest_digits() отдают свои результаты внешним слоям
форматирования (printf-style) и сканирования (scanf-style) в виде payload'ов:
DoubleBits.to_dict() и DigitSequence.to_dict(). Обратный путь —
DoubleBits.from_dict() и DigitSequence.from_dict().

Оба направления проходят через контракт: payload, не соответствующий схеме,
не покидает библиотеку и не попадает в неё. Нарушения собираются все сразу
и сообщаются одной ошибкой ContractViolation с путями полей.

Схемы (dragonfmt/core/contracts/schema/, package data):
- double_bits.json
- digit_sequence.json
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final, List

from jsonschema import Draft202012Validator, SchemaError, ValidationError

from dragonfmt.core.errors import ContractViolation


# =============================================================================
# SCHEMAS
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    """
    Схема контракта из package data.

    Args:
        name: имя контракта без расширения ('double_bits', 'digit_sequence')

    Raises:
        FileNotFoundError: если схемы с таким именем нет в пакете
    """
    resource = resources.files(__package__) / "schema" / f"{name}.json"
    if not resource.is_file():
        raise FileNotFoundError(f"contract schema not found: {name}")

    return json.loads(resource.read_text(encoding="utf-8"))


def _location(error: ValidationError) -> str:
    """'digits/0' для вложенных полей, '<payload>' для корня."""
    return "/".join(str(part) for part in error.absolute_path) or "<payload>"


# =============================================================================
# CONTRACT
# =============================================================================


class PayloadContract:
    """
    Контракт одного payload'а: проверенная схема и её validator.

    Схема проходит meta-validation (Draft 2020-12) при создании контракта,
    поэтому битая схема обнаруживается при импорте, а не на первом payload'е.
    """

    def __init__(self, name: str, schema: Dict[str, Any]):
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"invalid JSON Schema for {name} contract: {e.message}") from e

        self.name = name
        self.schema = schema
        self._validator = Draft202012Validator(schema)

    @classmethod
    def load(cls, name: str) -> "PayloadContract":
        return cls(name, load_schema(name))

    def violations(self, payload: Any) -> List[str]:
        """Все нарушения в детерминированном порядке (по пути поля)."""
        errors = sorted(self._validator.iter_errors(payload), key=_location)
        return [f"{_location(e)}: {e.message}" for e in errors]

    def is_valid(self, payload: Any) -> bool:
        return self._validator.is_valid(payload)

    def check(self, payload: Any) -> Dict[str, Any]:
        """
        Пропускает payload через контракт.

        Returns:
            тот же payload

        Raises:
            ContractViolation: со всеми нарушениями
        """
        violations = self.violations(payload)
        if violations:
            raise ContractViolation(self.name, violations)
        return payload


DOUBLE_BITS_CONTRACT: Final[PayloadContract] = PayloadContract.load("double_bits")
DIGIT_SEQUENCE_CONTRACT: Final[PayloadContract] = PayloadContract.load("digit_sequence")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_double_bits(payload: Any) -> Dict[str, Any]:
    """
    Проверка payload'а decompose().

    Raises:
        ContractViolation: если payload не соответствует double_bits.json
    """
    return DOUBLE_BITS_CONTRACT.check(payload)


def validate_digit_sequence(payload: Any) -> Dict[str, Any]:
    """
    Проверка payload'а shortest_digits().

    Raises:
        ContractViolation: если payload не соответствует digit_sequence.json
    """
    return DIGIT_SEQUENCE_CONTRACT.check(payload)
