import json

from displayedness.reporting.probe_reporter import ProbeReporter
from displayedness.validation.probe_runner import ProbeResult, ProbeStrategy
from displayedness.validation.visibility import WaitOutcome

def test_generate_report(tmp_path):
    report_path = tmp_path / "reports" / "displayed_report.json"
    reporter = ProbeReporter(str(report_path))
    outcome = WaitOutcome(visible=False, timed_out=True, timeout=3, elapsed=3.0)

    reporter.log_probe(ProbeResult(ProbeStrategy.BOUNDED_WAIT, "no scroll", displayed=False, wait=outcome))
    reporter.generate_report()

    assert json.loads(report_path.read_text()) == [{
        "probe": {
            "strategy": "bounded_wait",
            "label": "no scroll",
            "displayed": False,
            "element_found": False,
            "wait": {"visible": False, "timed_out": True, "timeout": 3, "elapsed": 3.0},
        }
    }]

def test_empty_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    reporter = ProbeReporter("report.json")

    reporter.generate_report()

    assert json.loads((tmp_path / "report.json").read_text()) == []
