import io

import pytest

from memadt.util import RandomNumGen, Usage, hash_size, list_dir, remove_data


def test_same_seed_same_sequence():
    a = RandomNumGen(0)
    b = RandomNumGen(0)
    assert [a(1000) for _ in range(50)] == [b(1000) for _ in range(50)]


def test_values_within_bound():
    rng = RandomNumGen(42)
    values = [rng(26) for _ in range(500)]
    assert all(0 <= v < 26 for v in values)
    assert len(set(values)) > 1


def test_zero_bound():
    rng = RandomNumGen(1)
    assert rng(0) == 0


def test_default_seed_gives_valid_values():
    rng = RandomNumGen()
    assert 0 <= rng(10) < 10


def test_usage_report_time():
    usage = Usage()
    out = io.StringIO()
    usage.report(True, False, out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Period time used : ")
    assert lines[0].endswith(" seconds")
    assert lines[1].startswith("Total time used  : ")


def test_usage_report_memory():
    usage = Usage()
    out = io.StringIO()
    usage.report(False, True, out)
    text = out.getvalue()
    assert text.startswith("Total memory used: ")
    assert text.endswith(" M Bytes\n")


def test_usage_report_nothing():
    out = io.StringIO()
    Usage().report(False, False, out)
    assert out.getvalue() == ""


def test_usage_total_accumulates():
    usage = Usage()
    sink = io.StringIO()
    usage.report(True, False, sink)
    first_total = usage.total_used_time
    sum(i * i for i in range(20000))
    usage.report(True, False, sink)
    assert usage.total_used_time >= first_total
    assert usage.total_used_time == pytest.approx(first_total + usage.period_used_time)


def test_usage_reset_clears_time():
    usage = Usage()
    usage.report(True, False, io.StringIO())
    usage.reset()
    assert usage.total_used_time == 0.0
    assert usage.period_used_time == 0.0


def test_list_dir_sorted_and_filtered(tmp_path):
    for name in ["dofile2", "dofile1", "other", "do"]:
        (tmp_path / name).write_text("")
    assert list_dir("", tmp_path) == ["do", "dofile1", "dofile2", "other"]
    assert list_dir("dof", tmp_path) == ["dofile1", "dofile2"]
    assert list_dir("zzz", tmp_path) == []


def test_list_dir_missing_directory(tmp_path):
    with pytest.raises(OSError):
        list_dir("", tmp_path / "missing")


@pytest.mark.parametrize(
    "s, expected",
    [(0, 7), (7, 7), (8, 13), (100, 127), (1000, 1499), (600000000, 7000003)],
)
def test_hash_size_table(s, expected):
    assert hash_size(s) == expected


def test_hash_size_monotone():
    sizes = [hash_size(1 << k) for k in range(32)]
    assert sizes == sorted(sizes)


def test_remove_data_keeps_order():
    items = [1, 2, 3, 2, 4, 2]
    remove_data(items, 2)
    assert items == [1, 3, 4]


def test_remove_data_absent_value():
    items = ["a", "b"]
    remove_data(items, "c")
    assert items == ["a", "b"]


def test_remove_data_everything():
    items = [5, 5, 5]
    remove_data(items, 5)
    assert items == []