import os
import threading
import config

LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}

_frame_id = None


def set_frame(frame_id):
    global _frame_id
    _frame_id = frame_id


def enabled(scope, level="INFO"):
    """Return True if a message for `scope` at `level` would be printed."""
    if scope in ("FRAME", "MAINLOOP") and not getattr(config, "LOG_MAIN_LOOP", True):
        return False
    if scope == "MOTION" and not getattr(config, "LOG_MOTION", True):
        return False
    threshold = LEVELS.get(getattr(config, "LOG_LEVEL", "INFO"), LEVELS["INFO"])
    return LEVELS.get(level, LEVELS["INFO"]) >= threshold


def format_message(scope, msg, level="INFO"):
    thread = threading.current_thread().name
    frame = _frame_id
    frame_tag = f" f{frame}" if frame is not None else ""
    return f"[{level}{frame_tag} thr{thread} {scope}] {msg}"


def log(scope, msg, level="INFO"):
    if not enabled(scope, level):
        return
    text = format_message(scope, msg, level)
    use_color = getattr(config, "LOG_COLOR", True) and os.getenv("NO_COLOR") is None
    if use_color:
        if level == "WARN":
            text = f"\x1b[33m{text}\x1b[0m"
        elif level == "ERROR":
            text = f"\x1b[31m{text}\x1b[0m"
    print(text)
