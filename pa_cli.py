# pa_cli.py
from __future__ import annotations

import subprocess
from typing import List, Optional, Sequence


LIST_CARDS_CMD = ("pactl", "list", "cards")


class CommandError(RuntimeError):
    def __init__(self, cmd: Sequence[str], msg: str, returncode: Optional[int] = None, stderr: str = "") -> None:
        super().__init__(f"{' '.join(cmd)} failed: {msg}")
        self.cmd: List[str] = list(cmd)
        self.returncode = returncode  # None when the command could not be started
        self.stderr = stderr


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(list(cmd), capture_output=True, text=True)


def pactl_list_cards() -> str:
    try:
        p = _run(LIST_CARDS_CMD)
    except OSError as e:
        raise CommandError(LIST_CARDS_CMD, str(e)) from e

    if p.returncode != 0:
        msg = (p.stderr or p.stdout).strip() or f"exit status {p.returncode}"
        raise CommandError(LIST_CARDS_CMD, msg, returncode=p.returncode, stderr=p.stderr or "")

    return p.stdout
