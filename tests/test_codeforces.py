import pytest

from labstructs.codeforces import (
    solve_1742c,
    solve_1883b,
    solve_1883c,
    stripes_winner,
)

BLUE_GRID = ["BBBBBBBB"] * 8
RED_GRID = ["BBBBBBBB"] * 3 + ["RRRRRRRR"] + ["BBBBBBBB"] * 4


def test_stripes_winner_red_row():
    assert stripes_winner(RED_GRID) == "R"


def test_stripes_winner_no_red_row():
    assert stripes_winner(BLUE_GRID) == "B"


def test_solve_1742c_matches_per_grid_answers():
    grids = [RED_GRID, BLUE_GRID, RED_GRID]
    text = f"{len(grids)}\n" + "\n".join("\n".join(g) for g in grids) + "\n"
    out = solve_1742c(text)
    assert out.splitlines() == [stripes_winner(g) for g in grids]
    assert out.endswith("\n")


def test_solve_1742c_missing_rows():
    with pytest.raises(ValueError):
        solve_1742c("1\nRRRRRRRR\n")


def test_solve_1883b_answers():
    text = "3\n3\n1 2 3\n3\n2 2 2\n3\n3 1 2\n"
    assert solve_1883b(text).splitlines() == ["NO", "YES", "YES"]


def test_solve_1883b_one_line_per_case():
    text = "2\n1\n5\n2\n4 0\n"
    lines = solve_1883b(text).splitlines()
    assert len(lines) == 2
    assert set(lines) <= {"YES", "NO"}


def test_solve_1883c_counts_carry_over():
    text = "2\n1 0\na\n2 0\naa\n"
    assert solve_1883c(text).splitlines() == ["1yes", "2no"]


def test_solve_1883c_case_numbers_prefix():
    text = "3\n2 0\nab\n1 1\nc\n3 1\nabc\n"
    lines = solve_1883c(text).splitlines()
    assert [line.rstrip("yesno") for line in lines] == ["1", "2", "3"]
    assert all(line[1:] in {"yes", "no"} for line in lines)