# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
import tempfile

from randbin_fuzzer.common import color
from randbin_fuzzer.common.logger import logger


def print_banner(msg):
    logger.info(color.BOLD + "%s - random byte mutation for file fuzzing" % msg + color.ENDC)


def read_binary_file(filename):
    with open(filename, 'rb') as f:
        return bytearray(f.read())


def umask_mode(mode=0o666):
    umask = os.umask(0)
    os.umask(umask)
    return mode & ~umask


def atomic_write(filename, data):
    # rename() is atomic only on same filesystem so the tempfile must be in same directory
    f = tempfile.NamedTemporaryFile(dir=os.path.dirname(filename), prefix=".randbin-", delete=False)
    try:
        try:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        finally:
            f.close()
        os.chmod(f.name, umask_mode())
        os.replace(f.name, filename)
    except BaseException:
        if os.path.exists(f.name):
            os.unlink(f.name)
        raise


def output_path(input_path, outdir):
    return os.path.join(outdir, os.path.basename(input_path))


def same_file(path_a, path_b):
    try:
        return os.path.samefile(path_a, path_b)
    except OSError:
        return False
