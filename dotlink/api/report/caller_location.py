import inspect
from pathlib import Path


def caller_location(depth: int = 2) -> str:
    """Describe the frame ``depth`` levels above this call as ``func:file:line``.

    ``depth=2`` names the caller of the function that calls this helper.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return ""
        return f"{frame.f_code.co_name}:{Path(frame.f_code.co_filename).name}:{frame.f_lineno}"
    finally:
        del frame
