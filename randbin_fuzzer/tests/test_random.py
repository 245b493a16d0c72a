# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Test RandomSource range, bias and seeding
"""

from randbin_fuzzer.common.rand import RandomSource


def get_int_bitmap(rand, limit, samples):

    bitmap = [0 for _ in range(limit)]

    for _ in range(samples*limit):
        val = rand.int(limit)
        bitmap[val] += 1

    return bitmap


def test_rand_int():

    rand = RandomSource()
    limits = [1, 2, 7, 13, 100, 255]
    samples = 2000

    for limit in limits:
        bitmap = get_int_bitmap(rand, limit, samples)

        assert(bitmap[0] != 0), "rand.int() not spanning complete range?"
        assert(bitmap[-1] != 0), "rand.int() not spanning complete range?"

        for idx in range(len(bitmap)):
            bias = abs(1-bitmap[idx]/samples)
            assert(bias < 0.1), "rand.int() detected bias at bitmap[%d]=%f - need more samples?" % (idx,bias)


def test_rand_int_limits():

    rand = RandomSource()

    assert(rand.int(0) == 0), "rand.int(0) should return 0"
    assert(rand.int(-5) == 0), "rand.int() on negative limit should return 0"

    for _ in range(1000):
        assert(rand.int(1) == 0)

    wide = (1 << 33) + 17
    for _ in range(100):
        val = rand.int(wide)
        assert(0 <= val < wide), "rand.int() out of range for wide limit"


def test_rand_seeded_replay():

    first = RandomSource(seed=1234)
    run_a = [first.int(1000) for _ in range(256)]

    second = RandomSource(seed=1234)
    run_b = [second.int(1000) for _ in range(256)]

    assert(run_a == run_b), "Equal seeds should replay equal draws"
    assert(first.seed == second.seed == 1234)


def test_rand_unseeded():

    rand_a = RandomSource()
    rand_b = RandomSource()

    assert(rand_a.seed != rand_b.seed), "Unseeded sources should not share a seed"



def test_rand_seeded_interleaved():

    clean = RandomSource(seed=42)
    expect = [clean.int(1 << 20) for _ in range(128)]

    seeded = RandomSource(seed=42)
    other = RandomSource()
    other_seeded = RandomSource(seed=7)

    real = []
    for _ in range(128):
        real.append(seeded.int(1 << 20))
        other.int(1 << 20)
        other_seeded.int(1 << 20)

    assert(real == expect), "Other sources disturbed a seeded sequence"
