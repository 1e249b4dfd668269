from ..core.node import Node


def sanity_check_problem(problem, max_states: int = 10_000):
    """
    Walks states breadth-first and checks the problem keeps its side of the contract:
    step costs are non-negative numbers, clones equal (and hash like) their source,
    and RESULT leaves its input state untouched.
    """
    from collections import deque
    seen = set()
    q = deque([problem.initial_node()])
    steps = 0
    while q and steps < max_states:
        node = q.popleft()
        s = node.state
        if s in seen:
            continue
        seen.add(s)
        copy = s.clone()
        if copy != s or hash(copy) != hash(s):
            raise AssertionError(f"clone of {s!r} does not equal/hash like its source")
        for a in problem.legal_actions(node):
            cost = problem.step_cost(s, a)
            if cost is None:
                raise AssertionError(f"step_cost is None for (s={s!r}, a={a!r})")
            if cost < 0:
                raise AssertionError(f"negative step_cost {cost} for (s={s!r}, a={a!r})")
            child = node.child_node(problem, a)
            if s != copy:
                raise AssertionError(f"result() mutated its input state {s!r} applying {a!r}")
            q.append(child)
        steps += 1
    return f"OK: visited {len(seen)} states; contract holds."
