import pytest

from nbodysim.benchmark import Benchmark


def fill(bench, warmup_value, value, count):
    for _ in range(100):
        bench.add_frame(warmup_value)
    for _ in range(count):
        bench.add_frame(value)


def test_average_is_zero_during_warmup():
    bench = Benchmark("Serial", 250)
    for _ in range(100):
        bench.add_frame(500.0)
    assert bench.average_fps() == 0.0


def test_warmup_frames_are_ignored():
    bench = Benchmark("Serial", 250)
    fill(bench, 9999.0, 60.0, 10)
    assert bench.average_fps() == 60.0
    assert bench.frame_count == 110


def test_average_of_mixed_frames_lies_between_extremes():
    bench = Benchmark("OpenMP", 500)
    fill(bench, 0.0, 30.0, 5)
    for _ in range(5):
        bench.add_frame(90.0)
    assert 30.0 < bench.average_fps() < 90.0


def test_save_with_too_few_frames(tmp_path, capsys):
    target = tmp_path / "results.csv"
    bench = Benchmark("Serial", 250)
    bench.add_frame(60.0)
    assert bench.save_results(target) is False
    assert not target.exists()
    assert "Not enough frames recorded for benchmark." in capsys.readouterr().out


def test_save_writes_header_once_and_appends(tmp_path):
    target = tmp_path / "results.csv"
    first = Benchmark("Serial", 250)
    fill(first, 1.0, 60.0, 3)
    second = Benchmark("OpenMP", 1000)
    fill(second, 1.0, 45.5, 3)

    assert first.save_results(target) is True
    assert second.save_results(target) is True

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "Implementation,NumBodies,AverageFPS",
        "Serial,250,60.00",
        "OpenMP,1000,45.50",
    ]


def test_save_reports_result(tmp_path, capsys):
    bench = Benchmark("Serial", 250)
    fill(bench, 1.0, 60.0, 2)
    bench.save_results(tmp_path / "out.csv")
    assert (
        "Benchmark saved: Serial with 250 bodies, Average FPS: 60.00"
        in capsys.readouterr().out
    )


def test_save_to_unwritable_path_raises(tmp_path):
    bench = Benchmark("Serial", 250)
    fill(bench, 1.0, 60.0, 2)
    with pytest.raises(OSError):
        bench.save_results(tmp_path)