import pytest

from algolab.hanoi import hanoi, hanoi_iterative, main


def _replay(n, moves, source="A", target="B", via="C"):
    pegs = {source: list(range(n, 0, -1)), target: [], via: []}
    for a, b in moves:
        disc = pegs[a].pop()
        assert not pegs[b] or pegs[b][-1] > disc
        pegs[b].append(disc)
    return pegs


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_recursive_moves_are_legal_and_complete(n):
    moves = []
    count = hanoi(n, "A", "B", "C", on_move=lambda a, b: moves.append((a, b)))
    assert count == len(moves) == 2**n - 1
    pegs = _replay(n, moves)
    assert pegs["B"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["C"] == []


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_iterative_moves_are_legal_and_complete(n):
    moves = []
    count = hanoi_iterative(
        n, "A", "B", "C", on_move=lambda a, b: moves.append((a, b))
    )
    assert count == len(moves) == 2**n - 1
    pegs = _replay(n, moves)
    assert pegs["B"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["C"] == []


@pytest.mark.parametrize("n", [1, 3, 5])
def test_iterative_matches_recursive(n):
    recursive_moves = []
    iterative_moves = []
    recursive_count = hanoi(
        n, "X", "Y", "Z", on_move=lambda a, b: recursive_moves.append((a, b))
    )
    iterative_count = hanoi_iterative(
        n, "X", "Y", "Z", on_move=lambda a, b: iterative_moves.append((a, b))
    )
    assert recursive_count == iterative_count
    assert recursive_moves == iterative_moves


def test_single_disc_move():
    moves = []
    count = hanoi(1, "A", "B", "C", on_move=lambda a, b: moves.append((a, b)))
    assert count == 1
    assert moves == [("A", "B")]


def test_recursive_no_callback_still_counts():
    assert hanoi(5) == 31


def test_iterative_no_callback_still_counts():
    assert hanoi_iterative(5) == 31


def test_recursive_rejects_zero_discs():
    with pytest.raises(ValueError):
        hanoi(0)


def test_iterative_rejects_zero_discs():
    with pytest.raises(ValueError):
        hanoi_iterative(0)


def test_main_default_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Hanoi(4, A, B, C) = 15"
    assert lines[-2] == ""
    assert len(lines) - 2 == hanoi(4)


def test_main_iterative_matches(capsys):
    main(["3"])
    recursive = capsys.readouterr().out
    main(["3", "--iterative"])
    assert capsys.readouterr().out == recursive


def test_main_rejects_zero():
    with pytest.raises(SystemExit):
        main(["0"])