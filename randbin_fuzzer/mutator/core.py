# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Mutate a single file with randbin.

Load the input file into memory, replace a percentage of its bytes with
random values and store the result under the same name in the output
directory. The input file is never modified and the output file only appears
once it has been written completely.
"""

import os
from collections import namedtuple

from randbin_fuzzer.common.logger import init_logger, logger
from randbin_fuzzer.common.rand import RandomSource
from randbin_fuzzer.common.util import atomic_write, output_path, print_banner, read_binary_file, same_file
from randbin_fuzzer.technique.helper import mutation_count
from randbin_fuzzer.technique.randbyte import mutate_random_bytes


MutationResult = namedtuple("MutationResult", ["output", "fsize", "nbytes"])


class MutationError(Exception):
    pass


class IoError(MutationError):

    op = "access file"

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = "Failed to %s %s" % (self.op, path)
        if reason:
            msg += ": %s" % reason
        super().__init__(msg)


class OpenInputError(IoError):
    op = "open input file"


class OpenOutputError(IoError):
    op = "open output file"


class AllocationError(MutationError):
    pass


def load_input(input_path):
    if not os.path.isfile(input_path):
        raise OpenInputError(input_path, "not a regular file")
    try:
        return read_binary_file(input_path)
    except MemoryError as e:
        raise AllocationError("Cannot allocate buffer for %s" % input_path) from e
    except OSError as e:
        raise OpenInputError(input_path, e.strerror) from e


def check_output(input_path, output_dir):
    if not os.path.isdir(output_dir):
        raise OpenOutputError(output_dir, "not a directory")

    outfile = output_path(input_path, output_dir)
    if same_file(input_path, outfile):
        raise OpenOutputError(outfile, "refusing to overwrite the input file")
    return outfile


def mutate(input_path, output_dir, percent, rand=None):
    """
    Write a mutated copy of input_path to output_dir.

    percent selects floor(fsize * percent / 100) distinct bytes, 100 or more
    mutates every byte. rand is any object providing int(limit); a freshly
    seeded RandomSource is used when it is omitted.

    Raises OpenInputError, OpenOutputError or AllocationError, all of them
    MutationError.
    """
    if percent < 0:
        raise ValueError("Percentage must not be negative (got %d)" % percent)
    if rand is None:
        rand = RandomSource()

    data = load_input(input_path)
    outfile = check_output(input_path, output_dir)

    fsize = len(data)
    nbytes = mutation_count(fsize, percent)

    logger.debug("File size:  %d" % fsize)
    logger.debug("Percentage: %d" % percent)
    logger.debug("nbytes:     %d" % nbytes)

    try:
        mutate_random_bytes(data, nbytes, rand)
    except MemoryError as e:
        raise AllocationError("Cannot allocate selection map for %d bytes" % fsize) from e

    try:
        atomic_write(outfile, data)
    except OSError as e:
        raise OpenOutputError(outfile, e.strerror) from e

    return MutationResult(outfile, fsize, nbytes)


def start(config):

    try:
        init_logger(config)
    except OSError as e:
        logger.error("Cannot open log file %s: %s" % (config.log, e.strerror))
        return 1
    print_banner("randbin")

    with logger:
        try:
            result = mutate(config.file, config.outdir, config.percent)
        except MutationError as e:
            logger.error(str(e))
            logger.error("File modification failure.")
            return 1

        logger.info("Mutated %d of %d bytes, output written to %s" % (result.nbytes, result.fsize, result.output))
    return 0
