import csv

from coffee_collection import benchmark, cli
from coffee_collection.datastructures import DynamicList


def test_demo_runs_and_clears(capsys):
    assert cli.main(["demo"]) == 0
    out = capsys.readouterr().out
    assert "Contains Lavazza coffee: True" in out
    assert "Contains Starbucks coffee: False" in out
    assert "After removing Nescafe coffee, Collection Size: 3" in out
    assert "Contains all additional coffees: True" in out
    assert "After clear(): Coffee Collection Size: 0" in out


def test_demo_retains_only_additional(capsys):
    collection = cli.cmd_demo(None)
    assert collection.is_empty()
    out = capsys.readouterr().out
    retained = out.split("After retain_all(additional): ")[1].split("Sorted Coffees")[0]
    assert "Nescafe" in retained
    assert "Starbucks" in retained
    assert "Lavazza" not in retained


def test_benchmark_writes_csv(tmp_path, capsys):
    path = tmp_path / "perf.csv"
    assert cli.main(["benchmark", "--path", str(path), "--base-input", "4", "--steps", "2",
                     "--iterations", "2"]) == 0
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == benchmark.CSV_HEADER
    assert len(rows) == 1 + 2 * len(benchmark.OPERATIONS)
    assert {r[0] for r in rows[1:]} == {"4", "8"}


def test_benchmark_operations_leave_expected_lists():
    data = [5, 3, 9]
    assert benchmark.op_append(data).to_array() == data
    assert benchmark.op_insert_front(data).to_array() == [9, 3, 5]
    assert benchmark.op_remove_at_end(data).is_empty()
    assert benchmark.op_list_cursor_walk(data).to_array() == data


def test_measure_true_space_grows_with_size():
    small = DynamicList(range(2))
    big = DynamicList(range(200))
    assert benchmark.measure_true_space(big) > benchmark.measure_true_space(small)


def test_errors_are_reported(monkeypatch, capsys):
    def boom(args):
        raise ValueError("item cannot be None")

    monkeypatch.setattr(cli, "cmd_demo", boom)
    assert cli.main(["demo"]) == 1
    assert "Error: item cannot be None" in capsys.readouterr().err
