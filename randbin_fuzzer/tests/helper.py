# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Helper functions for randbin tests
"""

def diff_positions(a, b):
    return [i for i, (x, y) in enumerate(zip(a, b)) if x != y]

def mask_positions(selected):
    return [i for i, v in enumerate(selected) if v]

def write_file(path, data):
    with open(path, 'wb') as f:
        f.write(data)
    return str(path)

def read_file(path):
    with open(path, 'rb') as f:
        return f.read()


class ScriptedRand:
    """
    Stand-in random source replaying a fixed list of draws.
    Records the limit of every int() call.
    """

    def __init__(self, draws):
        self.draws = list(draws)
        self.limits = []

    def int(self, limit):
        self.limits.append(limit)
        return self.draws.pop(0)
