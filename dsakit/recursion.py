"""Small recursion examples."""

from __future__ import annotations

from typing import Iterator, List, Tuple

Move = Tuple[int, str, str]


def countdown(n: int) -> Iterator[int]:
    """Yield ``n, n-1, ..., 1``."""
    while n > 0:
        yield n
        n -= 1


def hanoi_moves(
    n: int, source: str = "A", auxiliary: str = "B", destination: str = "C"
) -> List[Move]:
    """Moves ``(disk, from_peg, to_peg)`` that carry ``n`` disks to ``destination``."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    moves: List[Move] = []

    def solve(disks: int, src: str, aux: str, dst: str) -> None:
        if disks == 1:
            moves.append((1, src, dst))
            return
        solve(disks - 1, src, dst, aux)
        moves.append((disks, src, dst))
        solve(disks - 1, aux, src, dst)

    solve(n, source, auxiliary, destination)
    return moves