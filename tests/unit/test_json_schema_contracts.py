"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных токенов
- Детекция нарушений required полей
- Детекция нарушений constraints (const/enum/pattern/minimum)
- Интеграция с BigNum, HyperNumber и MathContext
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    HyperNumberValidator,
    MathContextValidator,
    RealNumberValidator,
    SchemaLoader,
    validate_hyper_number,
    validate_math_context,
    validate_real_number,
)
from src.core.math.bignum import BigNum
from src.core.math.context import MathContext, RoundingMode
from src.hypercomplex import HyperNumber


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_real_number():
    """Валидный вещественный токен."""
    return {"type": "constant", "kind": "real", "value": "-12.5"}


@pytest.fixture
def valid_hyper_number():
    """Валидный гиперкомплексный токен (кватернион)."""
    return {
        "type": "constant",
        "kind": "hyper",
        "dim": 4,
        "components": ["1.0", "-2.5", "0.0", "3.25"],
    }


@pytest.fixture
def valid_math_context():
    """Валидный сериализованный контекст."""
    return {"precision": 30, "rounding": "HALF_UP"}


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    real_schema = loader.load_schema("real_number")
    hyper_schema = loader.load_schema("hyper_number")
    context_schema = loader.load_schema("math_context")

    assert real_schema["properties"]["kind"]["const"] == "real"
    assert hyper_schema["properties"]["kind"]["const"] == "hyper"
    assert set(context_schema["properties"]["rounding"]["enum"]) == {m.value for m in RoundingMode}


def test_schema_loader_finds_schema_dir():
    """Каталог схем находится относительно корня проекта."""
    loader = SchemaLoader()

    assert loader.schema_dir.is_dir()
    assert loader.schema_dir.name == "schema"
    assert (loader.schema_dir / "real_number.json").exists()


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("real_number")
    schema2 = loader.load_schema("real_number")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


# =============================================================================
# TESTS - REAL NUMBER VALIDATION
# =============================================================================


def test_real_number_validator_accepts_valid_data(valid_real_number):
    """Валидация правильного токена."""
    validator = RealNumberValidator()
    validator.validate(valid_real_number)  # Не должно выбросить исключение
    assert validator.is_valid(valid_real_number)


def test_real_number_validate_function(valid_real_number):
    """Проверка функции validate_real_number."""
    validate_real_number(valid_real_number)


def test_real_number_rejects_missing_value(valid_real_number):
    """Токен без value отклоняется."""
    del valid_real_number["value"]

    with pytest.raises(ValidationError, match="value"):
        validate_real_number(valid_real_number)


@pytest.mark.parametrize("value", ["12", "1e5", "1.5.0", ".5", "+1.0", ""])
def test_real_number_rejects_non_canonical_value(valid_real_number, value):
    """value — каноническая строка с дробной частью."""
    valid_real_number["value"] = value

    assert not RealNumberValidator().is_valid(valid_real_number)


def test_real_number_rejects_wrong_kind(valid_real_number):
    valid_real_number["kind"] = "hyper"

    with pytest.raises(ValidationError):
        validate_real_number(valid_real_number)


def test_real_number_rejects_extra_fields(valid_real_number):
    valid_real_number["scale"] = 1

    assert not RealNumberValidator().is_valid(valid_real_number)


def test_real_number_reports_all_errors():
    """iter_errors перечисляет все нарушения."""
    errors = list(RealNumberValidator().iter_errors({"type": "variable", "kind": "real", "value": 1}))

    assert len(errors) == 2


# =============================================================================
# TESTS - HYPER NUMBER VALIDATION
# =============================================================================


def test_hyper_number_validator_accepts_valid_data(valid_hyper_number):
    """Валидация правильного токена."""
    validator = HyperNumberValidator()
    validator.validate(valid_hyper_number)
    assert validator.is_valid(valid_hyper_number)


def test_hyper_number_validate_function(valid_hyper_number):
    validate_hyper_number(valid_hyper_number)


def test_hyper_number_rejects_empty_components(valid_hyper_number):
    valid_hyper_number["components"] = []

    with pytest.raises(ValidationError):
        validate_hyper_number(valid_hyper_number)


def test_hyper_number_rejects_zero_dim(valid_hyper_number):
    valid_hyper_number["dim"] = 0

    assert not HyperNumberValidator().is_valid(valid_hyper_number)


def test_hyper_number_rejects_numeric_components(valid_hyper_number):
    """Компоненты передаются строками, не float."""
    valid_hyper_number["components"] = [1.0, 2.0]

    assert not HyperNumberValidator().is_valid(valid_hyper_number)


# =============================================================================
# TESTS - MATH CONTEXT VALIDATION
# =============================================================================


def test_math_context_validator_accepts_valid_data(valid_math_context):
    validator = MathContextValidator()
    validator.validate(valid_math_context)
    assert validator.is_valid(valid_math_context)


def test_math_context_validate_function(valid_math_context):
    validate_math_context(valid_math_context)


def test_math_context_rejects_negative_precision(valid_math_context):
    valid_math_context["precision"] = -1

    with pytest.raises(ValidationError):
        validate_math_context(valid_math_context)


def test_math_context_rejects_unknown_rounding(valid_math_context):
    valid_math_context["rounding"] = "ROUND_HALF_UP"

    assert not MathContextValidator().is_valid(valid_math_context)


# =============================================================================
# TESTS - INTEGRATION WITH VALUE TYPES
# =============================================================================


def test_bignum_token_passes_validation():
    """to_token всегда соответствует контракту."""
    for value in (BigNum.ZERO, BigNum.create("-0.001"), BigNum.create("1e20")):
        validate_real_number(value.to_token())


def test_bignum_token_round_trip(valid_real_number):
    assert BigNum.from_token(valid_real_number) == BigNum.create("-12.5")


def test_hyper_number_token_round_trip(valid_hyper_number):
    q = HyperNumber.from_token(valid_hyper_number)

    assert q == HyperNumber.hyper(1, "-2.5", 0, "3.25")
    assert q.to_token() == valid_hyper_number


def test_math_context_token_round_trip(valid_math_context):
    ctx = MathContext.from_token(valid_math_context)

    assert ctx == MathContext(precision=30, rounding=RoundingMode.HALF_UP)
    validate_math_context(ctx.to_token())
