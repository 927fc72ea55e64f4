# time_utils.py
import time


def now_monotonic() -> float:
    return time.perf_counter()


def elapsed_ms(started: float) -> int:
    # всегда неотрицательно: perf_counter монотонный
    return max(0, int((now_monotonic() - started) * 1000))
