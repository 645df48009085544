from __future__ import annotations

import ctypes
import sys

SW_HIDE = 0


def hide_console() -> bool:
    """Hide the console window on Windows when this process owns it.

    A console inherited from a terminal belongs to the shell and is left
    alone; only the one spawned for a double-clicked launch is hidden.
    """
    if sys.platform != "win32":
        return False

    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32
    user32 = ctypes.windll.user32
    kernel32.GetConsoleWindow.restype = wintypes.HWND
    kernel32.GetConsoleWindow.argtypes = []
    kernel32.GetCurrentProcessId.restype = wintypes.DWORD
    user32.GetWindowThreadProcessId.restype = wintypes.DWORD
    user32.GetWindowThreadProcessId.argtypes = [wintypes.HWND, ctypes.POINTER(wintypes.DWORD)]
    user32.ShowWindowAsync.restype = wintypes.BOOL
    user32.ShowWindowAsync.argtypes = [wintypes.HWND, ctypes.c_int]

    hwnd = kernel32.GetConsoleWindow()
    if not hwnd:
        return False

    owner_pid = wintypes.DWORD()
    user32.GetWindowThreadProcessId(hwnd, ctypes.byref(owner_pid))
    if owner_pid.value != kernel32.GetCurrentProcessId():
        return False

    user32.ShowWindowAsync(hwnd, SW_HIDE)
    return True
