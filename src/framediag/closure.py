"""Descendant closure over a flat process table."""

from framediag.models import ProcessTable


def descendant_closure(table: ProcessTable, root_pid: int) -> set[int]:
    """
    Return the pids transitively spawned by ``root_pid``.

    Repeats passes over the table, adding every row whose parent is the
    root or an already collected descendant, until a pass adds nothing.
    Order of the table does not matter, and cycles that do not pass through
    the root are never entered, so this always stops after at most
    ``len(table)`` productive passes.
    """
    descendants: set[int] = set()
    changed = True
    while changed:
        changed = False
        for pid, row in table.items():
            if pid in descendants:
                continue
            if row.parent_pid == root_pid or row.parent_pid in descendants:
                descendants.add(pid)
                changed = True
    return descendants
