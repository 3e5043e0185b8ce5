# dag.py
from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Dict, Iterable, List

if TYPE_CHECKING:
    from .model import Job


def validate_job_graph(jobs: Iterable[Job]) -> None:
    """
    Check that `needs` forms a DAG over the given jobs.

    Raises:
        ValueError: On a duplicate job id, a `needs` entry naming an unknown
            job, or a dependency cycle (the message lists the cycle).
    """
    jobs = list(jobs)
    counts = Counter(j.id for j in jobs)
    dupes = sorted(i for i, n in counts.items() if n > 1)
    if dupes:
        raise ValueError(f"Duplicate job ids found: {dupes}")

    needs: Dict[str, tuple] = {j.id: j.needs for j in jobs}
    for job_id, deps in needs.items():
        for dep in deps:
            if dep not in needs:
                raise ValueError(
                    f"Job '{job_id}' needs missing job '{dep}'. "
                    f"Known jobs: {sorted(needs)}"
                )

    # 1 = on the current path, 2 = fully checked
    state: Dict[str, int] = {}
    for root in needs:
        if root in state:
            continue
        path: List[str] = [root]
        stack = [iter(needs[root])]
        state[root] = 1
        while stack:
            dep = next(stack[-1], None)
            if dep is None:
                state[path.pop()] = 2
                stack.pop()
            elif state.get(dep) == 1:
                cycle = path[path.index(dep):] + [dep]
                raise ValueError(f"Job graph has a cycle: {' -> '.join(cycle)}")
            elif dep not in state:
                state[dep] = 1
                path.append(dep)
                stack.append(iter(needs[dep]))
