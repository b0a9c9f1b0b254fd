# SPDX-FileCopyrightText: © 2018 Bart Hanssens
# SPDX-License-Identifier: BSD-2-Clause

class MalformedInputError(ValueError):
    pass

class FramingError(ValueError):
    pass
