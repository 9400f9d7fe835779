"""
Visibility probes.
Provides the direct, bounded-wait and conditional-lookup strategies.
"""

from .visibility import WaitOutcome, is_displayed, visible_element_or_none, wait_until_visible
from .probe_runner import ProbeRequest, ProbeResult, ProbeRunner, ProbeStrategy

__all__ = [
    'WaitOutcome',
    'is_displayed',
    'visible_element_or_none',
    'wait_until_visible',
    'ProbeRequest',
    'ProbeResult',
    'ProbeRunner',
    'ProbeStrategy',
]
