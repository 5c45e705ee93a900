from __future__ import annotations

import logging
import os
import signal
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


def popen(cmd: Sequence[str], *, env: dict[str, str] | None = None) -> subprocess.Popen:
    """
    Start `cmd` as the leader of a new session so the server and any reloader
    it forks can be stopped together.
    """
    return subprocess.Popen(list(cmd), env=env, start_new_session=True)


def _signal_tree(proc: subprocess.Popen, sig: int) -> None:
    if os.name == "posix":
        try:
            os.killpg(proc.pid, sig)
            return
        except ProcessLookupError:
            return
        except OSError as e:
            logger.debug("killpg(%s) failed, signalling the process only: %s", proc.pid, e)
    if sig == getattr(signal, "SIGKILL", None):
        proc.kill()
    else:
        proc.terminate()


def terminate_tree(proc: subprocess.Popen | None, timeout_s: float = 5.0) -> None:
    if proc is None or proc.poll() is not None:
        return

    _signal_tree(proc, signal.SIGTERM)
    try:
        proc.wait(timeout=timeout_s)
    except subprocess.TimeoutExpired:
        logger.warning("Server did not stop within %.1fs, killing it", timeout_s)
        _signal_tree(proc, getattr(signal, "SIGKILL", signal.SIGTERM))
        proc.wait()
