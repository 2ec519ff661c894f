"""
Console runner for the Fire Risk Monitor.

Polls a single location on the configured interval and prints the readings,
the risk status and each history line. Pressing Enter triggers an immediate
poll; typing "q" quits.

Usage:
    python ui/console_main.py "Hoshiarpur"
"""

import sys
import threading
from pathlib import Path

# Add project root to Python path to enable imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from firerisk import config
from firerisk.display import format_status, format_triggered_factors
from firerisk.errors import FireRiskError
from firerisk.fire_risk_monitor import CycleResult, FireRiskMonitor
from firerisk.logging_config import configure_logging
from firerisk.poll_scheduler import PollScheduler


def print_result(result: CycleResult) -> None:
    for line in result.labels.as_lines():
        print(line)
    print(format_status(result.assessment))
    print(f"Risk factors: {format_triggered_factors(result.assessment)}")
    print(result.history_entry.to_display_string())
    print("-" * 60)


def alert(result: CycleResult) -> None:
    # Terminal bell
    print("\a*** Critical Fire Risk Detected! ***")


class ConsoleReporter:
    """
    Runs poll cycles and prints their output one block at a time.
    
    The scheduler thread and the Enter key both poll; holding one lock
    around the cycle and its printing keeps their output from interleaving.
    """
    
    def __init__(self, monitor: FireRiskMonitor, location: str):
        self.monitor = monitor
        self.location = location
        self._lock = threading.Lock()
    
    def poll(self) -> CycleResult:
        with self._lock:
            result = self.monitor.run_cycle(self.location)
            print_result(result)
            return result
    
    def report_error(self, error: FireRiskError) -> None:
        with self._lock:
            print(f"Error accessing weather data: {error}")


def main(argv: list[str]) -> int:
    location = argv[1] if len(argv) > 1 else config.DEFAULT_LOCATION
    if not location.strip():
        print("Please enter a location")
        return 2

    configure_logging()
    monitor = FireRiskMonitor(on_critical=alert)

    reporter = ConsoleReporter(monitor, location)
    scheduler = PollScheduler(reporter.poll, interval_ms=config.POLL_INTERVAL_MS)
    scheduler.start()

    try:
        for line in sys.stdin:
            if line.strip().lower() == "q":
                break
            try:
                scheduler.trigger_now()
            except FireRiskError as e:
                reporter.report_error(e)
    except KeyboardInterrupt:
        pass
    finally:
        scheduler.stop(timeout=5)
        monitor.client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
