import random
from collections import Counter

import pytest

from rcli.charsets import CharacterClass, LOWER, SYMBOLS, classify
from rcli.errors import (
    ConfigError,
    EmptyLength,
    EncodingError,
    InvalidCopies,
    GenerationError,
    LengthBelowClassCount,
    LengthTooLong,
    NoClassSelected,
)
from rcli.generator import CompositionConfig, generate, generate_many, validate_config

ALL = frozenset(CharacterClass)


def _classes_in(pw):
    return {classify(c) for c in pw}


def test_length_and_classes():
    pw = generate(CompositionConfig.from_flags(length=12))
    assert len(pw) == 12
    assert _classes_in(pw) == set(ALL)


def test_upper_lower_number_without_symbols():
    cfg = CompositionConfig.from_flags(length=8, upper=True, lower=True, number=True, symbol=False)
    pw = generate(cfg)
    assert len(pw) == 8
    assert any(c in CharacterClass.UPPER.pool for c in pw)
    assert any(c in CharacterClass.LOWER.pool for c in pw)
    assert any(c in CharacterClass.DIGIT.pool for c in pw)
    assert not any(c in SYMBOLS for c in pw)


def test_length_equal_to_class_count():
    pw = generate(CompositionConfig(length=4, include=ALL))
    assert len(pw) == 4
    assert _classes_in(pw) == set(ALL)


def test_coverage_and_exclusion_for_every_subset():
    rng = random.Random(1234)
    classes = list(CharacterClass)
    for mask in range(1, 16):
        include = frozenset(c for i, c in enumerate(classes) if mask & (1 << i))
        for length in (len(include), len(include) + 1, 20, 128):
            pw = generate(CompositionConfig(length=length, include=include), rng=rng)
            assert len(pw) == length
            assert _classes_in(pw) == set(include)


def test_lowercase_only_many_runs():
    cfg = CompositionConfig(length=20, include=frozenset({CharacterClass.LOWER}))
    counts = Counter()
    seen = set()
    for _ in range(10_000):
        pw = generate(cfg)
        assert len(pw) == 20
        assert all(c in LOWER for c in pw)
        counts.update(pw)
        seen.add(pw)
    assert len(seen) > 9_990
    # 200k draws over 25 letters: ~8000 each
    expected = 200_000 / len(LOWER)
    assert set(counts) == set(LOWER)
    assert max(counts.values()) < expected * 1.2
    assert min(counts.values()) > expected * 0.8


def test_seeded_rng_is_reproducible():
    cfg = CompositionConfig.from_flags(length=32)
    assert generate(cfg, rng=random.Random(7)) == generate(cfg, rng=random.Random(7))


def test_required_characters_are_not_pinned_to_the_front():
    cfg = CompositionConfig.from_flags(length=16, upper=True, lower=True, number=False, symbol=False)
    rng = random.Random(99)
    first = Counter(classify(generate(cfg, rng=rng)[0]) for _ in range(2000))
    assert first[CharacterClass.UPPER] > 500
    assert first[CharacterClass.LOWER] > 500


def test_too_short_raises():
    try:
        generate(CompositionConfig.from_flags(length=2))
        raised = False
    except ValueError:
        raised = True
    assert raised


def test_too_short_error_names_counts():
    with pytest.raises(LengthBelowClassCount) as excinfo:
        generate(CompositionConfig.from_flags(length=2))
    assert excinfo.value.required == 4
    assert "Password length 2 is too short for 4 required character types" == str(excinfo.value)


@pytest.mark.parametrize(
    "cfg, error",
    [
        (CompositionConfig.from_flags(length=0, lower=False, number=False, symbol=False), EmptyLength),
        (CompositionConfig.from_flags(length=-3), EmptyLength),
        (CompositionConfig.from_flags(length=129, upper=False, number=False, symbol=False), LengthTooLong),
        (CompositionConfig.from_flags(length=16, upper=False, lower=False, number=False, symbol=False), NoClassSelected),
        (CompositionConfig(length=3, include=ALL), LengthBelowClassCount),
    ],
)
def test_invalid_configs(cfg, error):
    with pytest.raises(error):
        validate_config(cfg)
    with pytest.raises(error):
        generate(cfg)
    assert issubclass(error, ConfigError)
    assert issubclass(error, GenerationError)


def test_max_length_is_accepted():
    pw = generate(CompositionConfig.from_flags(length=128))
    assert len(pw) == 128


def test_validation_is_idempotent():
    good = CompositionConfig.from_flags(length=10)
    assert validate_config(good) is None
    assert validate_config(good) is None

    bad = CompositionConfig.from_flags(length=0)
    verdicts = []
    for _ in range(2):
        try:
            validate_config(bad)
        except ConfigError as e:
            verdicts.append((type(e), str(e)))
    assert verdicts[0] == verdicts[1]


def test_config_is_immutable():
    cfg = CompositionConfig.from_flags(length=10)
    with pytest.raises(AttributeError):
        cfg.length = 20


def test_non_ascii_pool_raises_encoding_error():
    catalog = {CharacterClass.LOWER: "äöü"}
    cfg = CompositionConfig(length=5, include=frozenset({CharacterClass.LOWER}))
    with pytest.raises(EncodingError):
        generate(cfg, catalog=catalog)


def test_generate_many():
    cfg = CompositionConfig.from_flags(length=12)
    pws = generate_many(cfg, copies=3)
    assert len(pws) == 3
    assert all(len(pw) == 12 for pw in pws)
    with pytest.raises(InvalidCopies) as excinfo:
        generate_many(cfg, copies=0)
    assert isinstance(excinfo.value, GenerationError)
    assert excinfo.value.copies == 0
