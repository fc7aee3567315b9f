# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

from planning.model.task import Task


def filter_tasks(tasks: Sequence[Task], query: Optional[str]) -> list[Task]:
    """
    Keep the tasks whose name contains the query, ignoring case.

    A missing or blank query keeps every task.
    """
    if query is None or query.strip() == "":
        return list(tasks)

    query_lower = query.lower()
    return [task for task in tasks if query_lower in task.name.lower()]
