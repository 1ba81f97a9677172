"""ANSI helpers shared by the terminal commands."""
from __future__ import annotations

import shutil
import time

BRIGHT_GREEN = "\033[1;92m"
CYAN = "\033[96m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
BOLD = "\033[1m"
RESET = "\033[0m"


def g(s: str) -> str:
    return f"{BRIGHT_GREEN}{s}{RESET}"


def c(s: str) -> str:
    return f"{CYAN}{s}{RESET}"


def y(s: str) -> str:
    return f"{YELLOW}{s}{RESET}"


def r(s: str) -> str:
    return f"{RED}{s}{RESET}"


def dim(s: str) -> str:
    return f"{DIM}{s}{RESET}"


def rule(char: str = "═", width: int = 72) -> str:
    cols = shutil.get_terminal_size(fallback=(width, 20)).columns
    return g(char * min(cols, width))


def header(title: str) -> None:
    print(rule())
    print(f"  {BOLD}{title}{RESET}")
    print(rule())


def percent(rate: float) -> str:
    return f"{rate * 100:.0f}%"


def clock(seconds: int) -> str:
    return f"{seconds // 60}:{seconds % 60:02d}"


def date(timestamp: int) -> str:
    return time.strftime("%Y-%m-%d %H:%M", time.localtime(timestamp))


def no_data(what: str) -> None:
    print(f"  {y('NO DATA')} {dim(what)}")
