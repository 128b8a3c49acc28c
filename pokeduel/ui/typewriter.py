import os, time

__all__ = ["pause"]

def _skip_delays() -> bool:
    # Never sleep during automated tests
    return bool(os.getenv('PYTEST_CURRENT_TEST'))

def pause(seconds: float):
    """Pacing delay between narrated battle events."""
    if seconds <= 0 or _skip_delays():
        return
    time.sleep(seconds)
