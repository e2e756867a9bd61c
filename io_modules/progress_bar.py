# io_modules/progress_bar.py
#
# Member-count progress bar for CAD tower builds. cadquery gives no callback
# while it fuses solids, so the count shown is estimated from elapsed time.

import sys
import time
from multiprocessing import Event, Process

# rough cost of one cylinder/torus in cadquery
SECONDS_PER_MEMBER = 0.004

_bar_state = {"stop": None, "proc": None}

def estimate_build_seconds(n_members: int, seconds_per_member: float = SECONDS_PER_MEMBER) -> float:
    return max(0.5, n_members * seconds_per_member)

def _fmt_time(s: float) -> str:
    s = max(0.0, s)
    m, sec = divmod(int(round(s)), 60)
    h, m = divmod(m, 60)
    return f"{h:02d}:{m:02d}:{sec:02d}" if h else f"{m:02d}:{sec:02d}"

def estimated_members_done(elapsed: float, total_seconds: float, n_members: int) -> int:
    """Members assumed built after `elapsed` seconds; never reports the last one early."""
    if n_members <= 0:
        return 0
    if total_seconds <= 0:
        return n_members - 1
    return min(n_members - 1, int(n_members * elapsed / total_seconds))

def _render_line(done: int, n_members: int, bar_len: int, elapsed: float, remaining: float) -> str:
    frac = done / n_members if n_members else 1.0
    filled = int(bar_len * frac)
    bar = "#" * filled + "-" * (bar_len - filled)
    return f"\r[{bar}] {done:>5d}/{n_members} members  {_fmt_time(elapsed)}<{_fmt_time(remaining)}"

def _bar_loop(n_members: int, total_seconds: float, bar_len: int, tick: float, stop_evt):
    start = time.perf_counter()
    while not stop_evt.wait(tick):
        elapsed = time.perf_counter() - start
        done = estimated_members_done(elapsed, total_seconds, n_members)
        sys.stdout.write(_render_line(done, n_members, bar_len, elapsed, total_seconds - elapsed))
        sys.stdout.flush()

    elapsed = time.perf_counter() - start
    sys.stdout.write(_render_line(n_members, n_members, bar_len, elapsed, 0.0) + "\n")
    sys.stdout.flush()

def start_progress_bar(n_members: int, estimated_seconds: float, bar_len: int = 40, update_every: float = 0.1):
    """Run the bar in its own process so the CAD kernel is never interrupted."""
    stop_evt = Event()
    proc = Process(
        target=_bar_loop,
        args=(int(n_members), float(estimated_seconds), int(bar_len), float(update_every), stop_evt),
        daemon=True,
    )
    proc.start()
    _bar_state["stop"], _bar_state["proc"] = stop_evt, proc

def stop_progress_bar():
    """Signal the bar process and wait for its final line."""
    stop_evt, proc = _bar_state["stop"], _bar_state["proc"]
    if stop_evt is not None:
        stop_evt.set()
    if proc is not None:
        proc.join()
    _bar_state["stop"] = _bar_state["proc"] = None
