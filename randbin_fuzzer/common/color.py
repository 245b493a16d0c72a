# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

WARNING =    '\033[0;33m'
FAIL =       '\033[91m'
ENDC =       '\033[0m'
BOLD =       '\033[1m'
FLUSH_LINE = '\r\x1b[K'

WARNING_PREFIX =  "[WARN] "
ERROR_PREFIX =    "[ERROR] "
