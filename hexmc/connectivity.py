def has_path(board, origins, targets, team):
    """
    Depth first search for a chain of `team` cells joining any origin to any target.

    Every same-team neighbour is explored, so this is true reachability. The
    visited set is keyed by cell id and rebuilt on each call.
    """
    targets = set(targets)
    cells = board.cells
    visited = set()

    for origin in origins:
        if cells[origin].team != team or origin in visited:
            continue
        if origin in targets:
            return True

        visited.add(origin)
        stack = [origin]
        while stack:
            current = cells[stack.pop()]
            for neighbour in current.neighbours:
                if neighbour in visited or cells[neighbour].team != team:
                    continue
                if neighbour in targets:
                    return True
                visited.add(neighbour)
                stack.append(neighbour)

    return False


def is_winner(board, team):
    starts, ends = board.edges(team)
    return has_path(board, starts, ends, team)
