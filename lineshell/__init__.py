from lineshell.shell import Shell, main

__all__ = ["Shell", "main"]
