# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Wrapper for your favorite RNG solution

A RandomSource is constructed explicitly and handed to the mutation code.
Unseeded sources draw from the fastrand PCG32 generator, seeded from the
system entropy pool. fastrand keeps a single generator per process, so a
seeded source carries its own random.Random instance instead and replays the
same sequence of draws regardless of other sources.
"""

import random

import fastrand

PCG32_LIMIT = 1 << 32


class RandomSource:

    def __init__(self, seed=None):
        self.seed = None
        self.prng = None
        self.reseed(seed)

    def reseed(self, seed=None):
        if seed is None:
            self.seed = random.getrandbits(63)
            self.prng = None
            # seed from system and flush initial output
            fastrand.pcg32_seed(self.seed)
            fastrand.pcg32()
            fastrand.pcg32()
        else:
            self.seed = seed
            self.prng = random.Random(seed)

    # return integer N := 0 <= n < limit
    #   if rand.int(100) < 50   # execute with p(0.5)
    #   a[rand.int(len(a))] = 5 # never out of bounds
    def int(self, limit):
        if limit <= 0:
            return 0
        if self.prng is not None:
            return self.prng.randrange(limit)
        if limit < PCG32_LIMIT:
            return fastrand.pcg32bounded(limit)
        return self._int_wide(limit)

    def _int_wide(self, limit):
        # buffers beyond 4GiB: combine two draws, reject the biased tail
        span = PCG32_LIMIT * PCG32_LIMIT
        bound = span - (span % limit)
        while True:
            value = ((fastrand.pcg32() & 0xffffffff) << 32) | (fastrand.pcg32() & 0xffffffff)
            if value < bound:
                return value % limit
