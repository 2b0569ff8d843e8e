# SPDX-License-Identifier: MIT

from enum import StrEnum


class ComparisonOperator(StrEnum):
    LT = "<"
    LE = "<="
    EQ = "="
    GT = ">"
    GE = ">="
