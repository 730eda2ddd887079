import os
import signal
import sys

import psutil

from lineshell.config import INTERRUPT_MESSAGE, CHILD_TERMINATE_TIMEOUT


def cleanup_children():
    """Terminate every child process still running, kill the ones that ignore it"""
    try:
        children = psutil.Process().children(recursive=True)
    except psutil.Error:
        return

    for child in children:
        try:
            child.terminate()
        except psutil.NoSuchProcess:
            pass

    _, alive = psutil.wait_procs(children, timeout=CHILD_TERMINATE_TIMEOUT)
    for child in alive:
        try:
            child.kill()
        except psutil.NoSuchProcess:
            pass
    psutil.wait_procs(alive, timeout=CHILD_TERMINATE_TIMEOUT)


def handle_interrupt(signum, frame):
    """Ctrl+C / SIGTERM: thông báo, dọn tiến trình con và thoát ngay"""
    print(INTERRUPT_MESSAGE)
    cleanup_children()
    sys.stdout.flush()
    os._exit(0)


def install_interrupt_handler():
    """Khởi tạo signal handlers"""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
