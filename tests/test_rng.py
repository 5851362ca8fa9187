import pytest

from seedcrawl.core.rng import RNG, RNG_SALT


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    percents_a = [rng_a.percent() for _ in range(5)]
    percents_b = [rng_b.percent() for _ in range(5)]
    choices_a = [rng_a.choice(["a", "b", "c"]) for _ in range(5)]
    choices_b = [rng_b.choice(["a", "b", "c"]) for _ in range(5)]

    assert ints_a == ints_b
    assert percents_a == percents_b
    assert choices_a == choices_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_game_stream_is_salted_map_seed() -> None:
    game_rng = RNG.for_game(2026)
    assert game_rng.seed == 2026 ^ RNG_SALT

    world_rng = RNG(2026)
    salted_rng = RNG.for_game(2026)
    world_draws = [world_rng.randint(0, 10**6) for _ in range(5)]
    game_draws = [salted_rng.randint(0, 10**6) for _ in range(5)]
    assert world_draws != game_draws


def test_seed_is_masked_to_64_bits() -> None:
    assert RNG(2**64 + 5).seed == 5
    assert RNG(-1).seed == 2**64 - 1


def test_percent_stays_in_range() -> None:
    rng = RNG(7)
    assert all(0 <= rng.percent() < 100 for _ in range(500))


def test_choice_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError):
        RNG(1).choice([])
