import json
import math
from config import SIMULATION_START_TIME
import datetime

SPARK_CHARS = " ▁▂▃▄▅▆▇█"

def get_simulation_timestamp(current_min: float) -> str:
    """Converts simulation minutes to a formatted clock string."""
    delta = datetime.timedelta(minutes=current_min)
    timestamp = SIMULATION_START_TIME + delta
    return timestamp.strftime("%m/%d/%y, %I:%M:%S %p")

def log_event(state, event_type: str, source: str, payload: dict):
    """Creates a structured log entry and appends it to the state's event log."""
    timestamp_str = get_simulation_timestamp(state.current_min)
    log_entry = {
        "minute": round(state.current_min, 2),
        "timestamp": timestamp_str,
        "type": event_type,
        "source": source,
        "payload": payload
    }
    state.event_log.append(log_entry)
    # Print in real-time for observation
    print(f"{timestamp_str} | {source}: {payload.get('message', json.dumps(payload))}")

def format_pct(x: float) -> str:
    return f"{math.floor(x * 100 + 0.5)}%"

def format1(x: float) -> str:
    return f"{math.floor(x * 10 + 0.5) / 10:.1f}"

def resample(data: list, width: int) -> list:
    """Picks `width` evenly spaced values out of `data` (or all of them if fewer)."""
    if len(data) <= width:
        return list(data)
    if width < 2:
        return list(data[-1:])
    step = (len(data) - 1) / (width - 1)
    return [data[round(i * step)] for i in range(width)]

def render_sparkline(data: list, label: str, width: int = 60) -> str:
    """
    Renders a series as a one-line text sparkline with a min/max header.
    A flat series is drawn at the bottom row rather than dividing by a zero span.
    """
    lo, hi = min(data), max(data)
    span = (hi - lo) or 1
    top = len(SPARK_CHARS) - 1
    line = "".join(SPARK_CHARS[1 + round((y - lo) / span * (top - 1))] for y in resample(data, width))
    return f"{label}  (min {format1(lo)} · max {format1(hi)})\n{line}"
