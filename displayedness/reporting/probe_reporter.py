import json
import logging
import os

logger = logging.getLogger("displayedness.reporting.probe_reporter")


class ProbeReporter:
    def __init__(self, report_path: str):
        self.report_path = report_path
        self.logs = []

    def log_probe(self, result):
        self.logs.append({
            "probe": result.to_dict()
        })

    def log_scenario(self, scenario_result):
        self.logs.append({
            "scenario": scenario_result.to_dict()
        })

    def generate_report(self):
        directory = os.path.dirname(self.report_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.report_path, "w") as report_file:
            json.dump(self.logs, report_file, indent=4)
        logger.info(f"Wrote {len(self.logs)} entries to {self.report_path}")
