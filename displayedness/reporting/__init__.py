from .probe_reporter import ProbeReporter

__all__ = ['ProbeReporter']
