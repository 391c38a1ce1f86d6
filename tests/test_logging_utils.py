import csv

from orbit_viewer.core.logging_utils import RunLogger


def test_run_directories_are_unique(tmp_path):
    first = RunLogger(tmp_path, run_id="session")
    second = RunLogger(tmp_path, run_id="session")
    first.close()
    second.close()
    assert first.run_dir != second.run_dir
    assert (tmp_path / "last_run.txt").read_text(encoding="utf-8") == second.run_id


def test_buffers_flush_on_close(tmp_path):
    logger = RunLogger(tmp_path, run_id="buffered", timeseries_flush_threshold=100)
    logger.log_ts([1, 0.02, "earth", 400.0, 7.67, 1.54, 10.85, 8693.6, 1, 0.03])
    assert logger.timeseries_path.read_text().count("\n") == 1
    logger.close()
    logger.close()
    with logger.timeseries_path.open(newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert rows[0]["body"] == "earth"
    assert float(rows[0]["period_h"]) == 1.54


def test_event_details_are_quoted(tmp_path):
    with RunLogger(tmp_path, run_id="quoted", events_flush_threshold=1) as logger:
        logger.log_event([3, "rejected", "earth", 'set_mass: Mass must be > 0 kg, got "-1"'])
    with logger.events_path.open(newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert rows[0]["details"] == 'set_mass: Mass must be > 0 kg, got "-1"'
    assert rows[0]["tick"] == "3"


def test_headers_reach_disk_before_first_flush(tmp_path):
    logger = RunLogger(tmp_path, run_id="headers")
    try:
        assert logger.timeseries_path.read_text().splitlines() == [",".join(RunLogger.TIMESERIES_HEADER)]
        assert logger.events_path.read_text().splitlines() == [",".join(RunLogger.EVENTS_HEADER)]
    finally:
        logger.close()
