# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from arenta.query.filter_type import ComparisonOperator


class TaskFilter(TypedDict):
    operator: ComparisonOperator
    reference_date: pendulum.Date
    include_backlog: bool
    verbose: bool
